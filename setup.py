#!/usr/bin/python3

from setuptools import setup, find_packages

LONG_DESC = """
jitterpack enumerates the integer grid for polyomino packing.

When you pack tiles onto a grid, you try anchor positions around the
origin until one of them doesn't overlap anything that's already there.
The order in which you try them determines how the packing looks.

jitterpack walks the grid in rings of increasing size (max(|x|,|y|)), and
within a ring in a fixed "jittery" order that starts in the middle of each
side and works its way out to the corners. The next position depends on the
current one only.

It also contains a small trio-based search driver that asks your tiles
whether they fit, and a command line tool to look at the sequence.
"""

setup(
    name="jitterpack",
    version="0.1.0",
    description="Grid position sequencing for polyomino packing",
    url="http://github.com/smurfix/jitterpack",
    long_description=LONG_DESC,
    author="Matthias Urlichs",
    author_email="matthias@urlichs.de",
    license="GPLv3 or later",
    packages=find_packages(exclude=["tests"]),
    install_requires=["trio >= 0.16", "outcome", "asyncclick >= 8", "anyio", "pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["jitterpack = jitterpack.main:main"]},
    keywords=["polyomino", "packing", "grid"],
    python_requires=">=3.8",
    classifiers=[
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Framework :: Trio",
    ],
)
