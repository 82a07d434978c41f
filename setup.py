#!/usr/bin/env python3
"""
fnlang Programming Language
Lexical front end for a minimal statically-typed language.
"""

from setuptools import setup, find_packages
import os
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("fnlang requires Python 3.8 or later")

# Read version from _version.py
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "fnlang", "_version.py")
version = {}
if os.path.exists(version_file):
    with open(version_file) as f:
        exec(f.read(), version)
else:
    version["__version__"] = "0.1.0-alpha"

# Read README
readme_file = os.path.join(here, "README.md")
long_description = ""
if os.path.exists(readme_file):
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="fnlang",
    version=version.get("__version__", "0.1.0-alpha"),
    description="Lexical front end for the fnlang programming language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    author_email="dev@fnlang.org",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        # Core has no external dependencies for from-scratch implementation
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0", 
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9", 
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
    ],
    keywords=["programming-language", "compiler", "lexer", "tokenizer"],
    zip_safe=False,
)
