from setuptools import setup, find_packages
import os

setup(
    name="VECalgebra",
    version="1.0.0",
    description="Vector algebra primitives (JIT compiled) over plain numeric sequences",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
        # JIT compilation
        "numba>=0.56.0",
    ],
    extras_require={
        # Test suite
        "test": [
            "pytest>=7.0",
        ],
        # Complete installation with all optional features
        "all": [
            "numpy>=1.20.0",
            "numba>=0.56.0",
            "pytest>=7.0",
        ],
    },
    zip_safe=False,
)
