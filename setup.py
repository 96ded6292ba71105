from setuptools import setup, find_packages

setup(
    name="terminal_minesweeper",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "flask",
        "pyyaml"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    entry_points={
        "console_scripts": [
            "minesweeper=frontend.cli:main",
            "minesweeper-api=frontend.app:main"
        ]
    },
)
