#!/usr/bin/env python

#----------------------------------------------------------------------------------------------------------------------------------

# standards
import setuptools
from os import path

#----------------------------------------------------------------------------------------------------------------------------------

with open(path.join(path.dirname(__file__), 'README.md'), 'rb') as file_in:
    long_description = file_in.read().decode('UTF-8')

setuptools.setup(
    name='xmlcleaner',
    version='0.1.0',
    description='Remove comments, namespaced elements and attributes, and unused namespace declarations from XML documents',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=[
        'lxml>=5.0',
    ],
    extras_require={
        'test': [
            'pytest>=6',
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup :: XML',
        'Topic :: Software Development :: Libraries',
    ],
)

#----------------------------------------------------------------------------------------------------------------------------------
