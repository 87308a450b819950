#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'tqdm']
test_requires = ['tox', 'pytest']

setup(
    name='fpfold',
    version='0.1.0',
    packages=['fpfold'],
    install_requires = requires,
    extras_require = {'test': test_requires},
    entry_points = {
      'console_scripts': [
        'fpfold = fpfold.ui:ui_main',
        ],
    },
    license='MIT',
    description='single pass map/filter/reduce with transducers, compared against the usual ways.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
