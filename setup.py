from setuptools import setup, find_packages

setup(
    name="mazepath",
    version="0.1.0",
    packages=find_packages(include=["mazepath", "mazepath.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="Non-backtracking shortest paths over weighted tile-maze graphs",
    long_description=(
        "Builds weighted directed graphs with wraparound tunnels from tile maps "
        "with per-tile elevation, and computes shortest non-backtracking paths "
        "over any graph exposing vertices and weighted edges."
    ),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
    python_requires=">=3.8",
)
