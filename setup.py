#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name="elorating",
    version="0.0.1",
    author="Various",
    description="Elo rating updates for matches between any number of players.",
    long_description=__doc__,
    packages=find_packages(exclude=("unit_tests", "unit_tests.*")),
    python_requires=">=3.7",
    extras_require={"test": ["pytest"]},
    zip_safe=True,
    license="MIT",
)
