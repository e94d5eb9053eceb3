#!/usr/bin/env python
# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""
Setuptools entrypoint

This file should not be run directly. To install, use:

    pip install .

To build a package for distribution, use:

    pip install --upgrade build
    python -m build

"""
from os.path import dirname
from os.path import join as pjoin

from setuptools import find_packages, setup

# Get version and long description without importing the package
info = {}
with open(pjoin(dirname(__file__), 'ciftimodels', 'info.py')) as fobj:
    exec(fobj.read(), info)

setup(
    name='ciftimodels',
    version=info['__version__'],
    description='Typed brain model records from CIFTI-2 headers',
    long_description=info['long_description'],
    long_description_content_type='text/x-rst',
    license='MIT',
    python_requires='>=3.8',
    packages=find_packages(include=['ciftimodels', 'ciftimodels.*']),
    package_data={'ciftimodels': ['tests/data/*.xml']},
    install_requires=[
        'numpy >=1.20',
        'packaging >=22',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'cifti-brainmodels=ciftimodels.cmdline.ls_brainmodels:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
    ],
)
