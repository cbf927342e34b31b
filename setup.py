#!/usr/bin/env python
import ast
import os
import re
import sys

from setuptools import find_packages, setup


here = os.path.dirname(__file__)


def read(filename):
    with open(os.path.join(here, filename), encoding='utf-8') as f:
        return f.read()


metadata = {
    k: ast.literal_eval(v)
    for k, v in re.findall(
        '^(__version__|__author__|__licence__) = (.*)$',
        read('src/punchcard/__init__.py'),
        flags=re.MULTILINE,
    )
}

version = metadata['__version__']

changes = read('CHANGES.rst').split('\n\n\n')
changes_in_latest_versions = '\n\n\n'.join(changes[:3])

short_description = 'Add up work hours and round them to the quarter hour'
long_description = ''.join([
    read('README.rst'),
    '\n\n',
    changes_in_latest_versions,
])

tests_require = ['pytest']
if sys.version_info < (3, 7, 0):
    sys.exit("Python 3.7 is the minimum required version")

setup(
    name='punchcard',
    version=version,
    author=metadata['__author__'],
    description=short_description,
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license=metadata['__licence__'],
    keywords='time timesheets work hours rounding',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Office/Business',
    ],
    python_requires='>= 3.7',

    packages=find_packages('src'),
    package_dir={'': 'src'},
    test_suite='punchcard.tests.test_suite',
    tests_require=tests_require,
    extras_require={
        'test': [
            'pytest',
        ],
    },
    zip_safe=False,
    entry_points="""
    [console_scripts]
    punchcard = punchcard.main:main
    """,
    install_requires=[],
)
