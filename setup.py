#!/usr/bin/env python3
"""
tree-selector setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="tree-selector",
    version="1.0.0",
    description="CSS-like selectors for querying tree-sitter syntax trees",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="tree-selector developers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "tree-selector=tree_selector.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "tree-sitter-javascript>=0.23",
        ],
        "javascript": [
            "tree-sitter-javascript>=0.23",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing",
    ],
    keywords="tree-sitter, css, selector, query, syntax tree",
)
