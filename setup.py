from setuptools import setup, find_packages

setup(
    name="cluedo_board",
    version="0.1.0",
    packages=find_packages(include=["cluedo_board", "cluedo_board.*"]),
    package_data={
        "cluedo_board": ["data/*.txt"],
    },
    install_requires=[
        "numpy>=1.24.3",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'cluedo-board=cluedo_board.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)
