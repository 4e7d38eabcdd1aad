"""
Setup script for the treasure-hunt package.

Installs the treasure_hunt package from src/ together with the
`treasure-hunt` console script.
"""

from setuptools import setup, find_packages

setup(
    name="treasure-hunt",
    version="1.0.0",
    description="Treasure Hunt - turn-based grid betting game engine with a local chain simulator",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "treasure-hunt=treasure_hunt.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
