"""
CLI interface for the Cluedo board engine.

Provides command-line tools for inspecting board layouts:
- Rendering a layout with tokens on their start squares
- Listing rooms and their stairs
"""

__all__ = ['cli']

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
