#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'tqdm']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='xducer',
    version='0.1.0',
    packages=['xducer'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'xducerdbg = xducer.dbg:dbg_main',
        ],
    },
    license='MIT',
    description='composable map/filter transducers and a pipe combinator.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
