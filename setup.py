#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="subprobe",
    version="1.0.0",
    description="Concurrent DNS subdomain prober with wildcard filtering",
    author="SUBPROBE Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "dnspython",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "subprobe=subprobe.cli:main",
        ],
    },
    python_requires=">=3.9",
)
