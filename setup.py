"""Session Calculator - console arithmetic with session history."""
from setuptools import setup, find_packages

setup(
    name="session-calculator",
    version="1.0.0",
    description="Interactive console calculator that keeps a history of calculation sessions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "session-calc=session_calculator.cli:main",
        ],
    },
    python_requires=">=3.10",
)
