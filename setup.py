# -*- coding: utf-8 -*-
"""
Loopless is a worked tutorial, with a small helper library, on replacing
hand-written loops over pandas DataFrames.
"""

import os
from codecs import open

from setuptools import setup, find_packages

_dir = lambda *x: os.path.join(os.path.abspath(os.path.dirname(__file__)), *x)

# Get the long description from the README file
with open(_dir('README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Get the version information from __version__.py
version = {}
with open(_dir('loopless', '__version__.py'), 'r', encoding='utf-8') as f:
    exec(f.read(), version)

setup(
    name=version['__title__'],
    version=version['__version__'],
    description=version['__description__'],
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=version['__author__'],
    license=version['__license__'],
    keywords='pandas,tutorial,iteration,data analysis',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Natural Language :: English',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3',
    ],
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'loopless.data': ['mtcars.csv']},
    python_requires='>=3.8',
    install_requires=[
        'pandas>=2.0',
        'numpy',
        'tqdm',
        'jinja2',
        ],
    extras_require={
        'test': ['pytest'],
    },
)
