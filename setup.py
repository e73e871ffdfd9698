#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: setup.py
# Author: Wadih Khairallah
# Description: 
# Created: 2025-06-02 10:00:12
# Modified: 2025-06-09 18:55:40

import re
from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

def read_requirements():
    return [
        line.strip()
        for line in (here / "requirements.txt").read_text().splitlines()
        if line and not line.startswith("#")
    ]

def get_version():
    version_file = (here / "wordtree" / "__version__.py").read_text()
    return re.search(r"__version__ = ['\"]([^'\"]+)['\"]", version_file).group(1)

setup(
    name="wordtree",
    version=get_version(),
    author="Wadih Khairallah",
    author_email="woodyk@gmail.com",
    description="Word statistics, sentiment and context trees for free text.",
    long_description=(here / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["wordtree", "wordtree.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "wordtree = wordtree.cli:main",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
