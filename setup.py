#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pdfsigner',
    version='1.0.0',
    description='Visible PDF signing with BatchPDFSign and signature verification with pdfsig.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Security :: Cryptography',
        'Topic :: Office/Business',
    ],
    keywords='pdf signature pdfsig batchpdfsign keystore pkcs12',
    packages=find_packages(exclude=['examples', 'tests']),
    package_data={'pdfsigner': ['ext/*.jar', 'ext/README']},
    include_package_data=True,
    platforms=["linux", "macos"],
    python_requires='>=3.8',
    install_requires=['attrs', 'pytz'],
    extras_require={
        'test': ['cryptography', 'pytest'],
    },
    test_suite="tests",
)
