
from __future__ import print_function


import sys
if sys.version_info[0] < 3:
	print('This package does not support python2. Try `python3 setup.py`', file=sys.stderr)
	sys.exit(1)

from setuptools import setup
from setuptools import find_packages

setup(
	name='graphwalk',
	version = '0.0',
	description = 'Graph traversal, shortest paths and dominators over an event-driven search engine',
	url = 'https://github.com/ExpHP/circuit',
	author = 'Michael Lamparski',
	author_email = 'lampam@rpi.edu',

	install_requires=[
		'networkx',
		'toml',
	],

	extras_require={
		'test': [
			'numpy',
			'pytest',
		],
	},

	packages=find_packages(), # include sub-packages
)
