'''
Graph traversal and path analysis.

Breadth- and depth-first search with a uniform event protocol, single-source
shortest paths under a pluggable distance relaxer, and Lengauer-Tarjan
dominators, all built on the same traversal engine.
'''

from graphwalk.config import Config
from graphwalk.graph import *
from graphwalk.algorithms import *
