#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from pathlib import Path

from setuptools import find_packages, setup

# the package itself can't be imported before its dependencies are installed
about: dict[str, str] = {}
exec((Path(__file__).parent / 'bincodec' / 'version.py').read_text(), about)

setup(
    name='bincodec',
    version=about['__version__'],
    description='Bincode compatible binary codec for statically described shapes',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['bincodec-cli=bincodec_cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('bincodec_tests', 'bincodec_tests.*')),
    package_data={
        'bincodec.conf': ['*.yml'],
        'bincodec.fixtures': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2.0',
        'PyYAML>=6.0',
        'structlog>=22.1',
        'ConfigArgParse>=1.5',
        'colorama>=0.4',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
