#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = [
    'numpy',
    'astropy',
    'pathos'
]

test_requirements = [
    'pytest',
]

setup(
    name='hostspell',
    version='0.1.0',
    description="Norvig-style spelling correction for URL hosts",
    long_description=readme + '\n\n' + history,
    author="hostspell developers",
    packages=find_packages(),
    entry_points={
        'console_scripts': []
    },
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': test_requirements
    },
    license="MIT license",
    zip_safe=False,
    keywords='hostspell',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    tests_require=test_requirements,
)
