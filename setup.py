#!/usr/bin/env python

import os
from setuptools import setup


# this is only going to work in the case that nothing is installed directly from git etc
requirements = open(os.path.join(os.path.dirname(os.path.realpath(__file__)), 'requirements.txt')).read().split('\n')
requirements = [r.strip() for r in requirements if not r.strip().startswith('#') and r.strip()]

setup(
    name='arith',
    version='0.0.1',
    description='Arithmetic expression evaluator: scanner, recursive-descent parser and tree-walking evaluator',
    packages=['arith', 'arith.syntax'],
    python_requires='>=3.8',
    entry_points = {
        'console_scripts': ['arith=arith.repl:main'],
    },
    install_requires= requirements,
    extras_require = {
        'test': ['pytest'],
    },
)
