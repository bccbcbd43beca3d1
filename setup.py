# SPDX-FileCopyrightText: 2025 primeshare contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="primeshare",
    version="0.1.0",
    description="Threshold secret sharing of byte strings over GF(257)",
    author="primeshare contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "primeshare=primeshare.cli:main",
        ],
    },
)
