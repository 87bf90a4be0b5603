#!/usr/bin/env python3
"""
Stream Package Planner Package Setup
"""

import os

from setuptools import setup, find_packages

setup(
    name="stream-package-planner",
    version="2026.1.0",
    packages=find_packages(include=["planner", "config", "web", "web.*", "scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "pandas",
        "flask>=2.2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'compare-packages=scripts.compare_packages:main',
        ],
    },
    author="Stream Package Planner",
    description="Ranks streaming packages and package combinations by match coverage",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
