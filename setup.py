#!/usr/bin/env python3
"""Mini Azaan Installer - Setup"""

from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="mini-azaan-installer",
    version="1.0.0",
    description="Provision a Raspberry Pi with the Mini Azaan service",
    author="Mini Azaan Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"azaan_installer": ["stubs/*/*.j2"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "mini-azaan-install=azaan_installer.main:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
