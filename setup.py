#!/usr/bin/env python3

import os
import sys
from setuptools import setup, find_packages

def die(msg):
    print(msg, file=sys.stderr)
    sys.exit(1)

if sys.version_info < (3, 5):
    die("Need Python >= 3.5; found {}".format(sys.version))

with open(os.path.join(os.path.dirname(__file__), "requirements.txt")) as f:
    reqs = [line.strip() for line in f if line.strip()]

setup(
    name='intpoly',
    version='1.0',
    description='Dense univariate polynomials with integer coefficients',
    packages=find_packages(exclude=["tests"]),
    entry_points = { "console_scripts": "intpoly=intpoly.main:run" },
    install_requires=reqs,
    extras_require={ "test": ["pytest"] },
    )
