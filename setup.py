"""
Setup script for the primality benchmark package.
"""

from setuptools import setup, find_packages


def read_requirements(path):
    with open(path, "r") as f:
        return [
            line.strip() for line in f if line.strip() and not line.startswith("#")
        ]


setup(
    name="primality-bench",
    version="0.1.0",
    description="Trial division and Miller-Rabin primality tests with timing",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "dev": read_requirements("requirements-dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "primality-bench=primality.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
