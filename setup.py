#!/usr/bin/env python3
"""
cryptoh - Setup Script

For development installation:
    pip install -e ".[dev]"
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from package
version = "1.3.0"

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text() if readme_path.exists() else ""

setup(
    name="cryptoh",
    version=version,
    description="A clean and easy-to-use cryptography helper library",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="cryptoh contributors",
    license="MIT",
    
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    
    install_requires=[
        "cryptography>=3.4",
        "toml>=0.10",
    ],
    
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=3.0",
            "black>=22.0",
            "mypy>=0.9",
        ],
    },
    
    entry_points={
        "console_scripts": [
            "cryptohctl=cryptohctl.main:main",
        ],
    },
    
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Security :: Cryptography",
    ],
    
    keywords="crypto cryptography hash rsa signature salt security",
)
