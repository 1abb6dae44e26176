"""
Setup script for the shviz package.
"""

from setuptools import setup, find_namespace_packages

setup(
    name="shviz",
    version="0.1.0",
    description="Spherical harmonic sphere visualizer",
    packages=find_namespace_packages(include=["shviz", "shviz.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "scipy>=1.7.0",
            "matplotlib>=3.4.0",
        ],
        "viewer": [
            "matplotlib>=3.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shviz=shviz.harmonics.examples:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
    python_requires=">=3.8",
)
