"""
Setup script for drivethru-scorer package.

Installs the dialogue engine and its SQLite score store. The schema
file ships as package data so a fresh database can be created from an
installed wheel.
"""

from setuptools import setup, find_packages

setup(
    name="drivethru-scorer",
    version="1.0.0",
    description="Drive Thru score keeper - dialogue state machine and leaderboard engine",
    author="Drive Thru Team",
    license="Apache-2.0",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "drivethru_scorer": ["_storage/schema.sql"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
