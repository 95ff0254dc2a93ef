
'''
Dominators of a directed flow graph, by Lengauer and Tarjan.

A vertex ``d`` dominates ``v`` if every path from the root to ``v`` passes
through ``d``.  The immediate dominator of ``v`` is its closest strict
dominator; these form the dominator tree.

The computation runs in three phases:

 1. A depth-first search numbers the reachable vertices in discovery order
    and records the dfs tree.
 2. Walking the vertices in *decreasing* discovery order, the semidominator
    of each vertex is found.  Predecessors discovered later than the vertex
    are resolved through an "ancestor with the lowest semidominator" query,
    answered by a link/eval forest with path compression.
 3. Immediate dominators follow from the semidominators; most are known as
    soon as the parent of a vertex is processed, the rest are fixed up in a
    final pass in increasing discovery order.

Reference:  Thomas Lengauer and Robert Endre Tarjan, "A fast algorithm for
finding dominators in a flowgraph", ACM TOPLAS 1(1):121-141, 1979.
'''

import collections

from graphwalk.algorithms.base import RootedAlgorithmBase
from graphwalk.algorithms.observers import attach, VertexPredecessorRecorder, VertexRecorder, VertexTimeStamper
from graphwalk.algorithms.search import DepthFirstSearch, DIRECTED

__all__ = [
	'LengauerTarjanDominators',
	'compute_dominators',
	'tree_from_idoms',
]

class LengauerTarjanDominators(RootedAlgorithmBase):
	'''
	Computes semidominators and immediate dominators.

	The graph must be directed and provide ``in_edges``.  Vertices that are
	unreachable from the root appear in none of the results, and the root
	itself has neither a semidominator nor an immediate dominator.

	If no root is set, every tree of a depth-first forest over the whole graph
	is treated as a flow graph of its own, rooted where the forest put it.
	'''
	def __init__(self, graph, host=None):
		super().__init__(graph, host)
		if not graph.is_directed():
			raise ValueError('dominators are only defined for directed graphs')
		if not callable(getattr(graph, 'in_edges', None)):
			raise ValueError('dominators need a graph which provides in_edges')

		self.time_stamps = {}
		self.semidominators = {}
		self.immediate_dominators = {}

	def _initialize(self):
		self.time_stamps = {}
		self.semidominators = {}
		self.immediate_dominators = {}
		self._parent = {}
		self._order = []

	def _internal_compute(self):
		g = self._graph
		self._dfs_phase()
		if self.is_cancelling():
			return
		self._log.debug('dominators: %d of %d vertices reachable', len(self._order), g.num_vertices())

		self._semidominator_phase()
		if self.is_cancelling():
			return
		self._idom_fixup_phase()

	def _dfs_phase(self):
		g = self._graph
		dfs = DepthFirstSearch(g, host=self, access=DIRECTED)
		stamper = VertexTimeStamper(self.time_stamps)
		order = VertexRecorder('discover_vertex', self._order)
		predecessors = VertexPredecessorRecorder()
		with attach(stamper, dfs), attach(order, dfs), attach(predecessors, dfs):
			dfs.compute(self.root_vertex())

		for (v, e) in predecessors.predecessors.items():
			self._parent[v] = g.edge_source_given_target(e, v)

	def _semidominator_phase(self):
		g = self._graph
		stamps = self.time_stamps
		parent = self._parent
		semi = self.semidominators
		idom = self.immediate_dominators

		self._ancestor = {}
		self._best = {}
		bucket = collections.defaultdict(list)
		# vertices whose idom is that of another vertex; resolved in the last phase
		self._same_dom = {}

		for w in reversed(self._order):
			if self.is_cancelling():
				return

			if w not in parent:
				continue  # a dfs root

			p = parent[w]
			s = p
			for e in g.in_edges(w):
				u = g.edge_source_given_target(e, w)
				if u not in stamps or u == w:
					continue  # unreachable, or a self-loop

				if stamps[u] < stamps[w]:
					candidate = u
				elif u in self._ancestor:
					candidate = semi[self._eval(u)]
				else:
					continue  # root of a later dfs tree

				if stamps[candidate] < stamps[s]:
					s = candidate

			semi[w] = s
			bucket[s].append(w)
			self._link(p, w)

			# every vertex whose semidominator is p now has enough
			#  information to determine its immediate dominator
			for v in bucket.pop(p, ()):
				y = self._eval(v)
				if semi[y] == semi[v]:
					idom[v] = p
				else:
					self._same_dom[v] = y

	def _idom_fixup_phase(self):
		idom = self.immediate_dominators
		for w in self._order:
			if w in self._same_dom:
				idom[w] = idom[self._same_dom[w]]

		# the results are keyed in discovery order
		self.immediate_dominators = {w:idom[w] for w in self._order if w in idom}

	def _link(self, p, w):
		self._ancestor[w] = p
		self._best[w] = w

	def _eval(self, v):
		'''
		Get the vertex with the lowest semidominator on the path from ``v``
		up to (not including) the topmost linked ancestor.

		``v`` must already be linked.  Compresses the path as a side effect.
		'''
		ancestor = self._ancestor
		best = self._best
		stamps = self.time_stamps
		semi = self.semidominators

		# climb while the ancestor is itself linked
		path = []
		x = v
		while ancestor[x] in ancestor:
			path.append(x)
			x = ancestor[x]

		# walk back down, compressing each vertex onto the top of the path
		for y in reversed(path):
			a = ancestor[y]
			if stamps[semi[best[a]]] < stamps[semi[best[y]]]:
				best[y] = best[a]
			ancestor[y] = ancestor[a]

		return best[v]

	def dominator_tree(self):
		''' Map each vertex to the list of vertices it immediately dominates. '''
		return tree_from_idoms(self.immediate_dominators)

	def dominates(self, a, b):
		''' Does ``a`` dominate ``b``?  (every reachable vertex dominates itself) '''
		if b not in self.time_stamps or a not in self.time_stamps:
			return False
		limit = len(self.time_stamps)
		for _ in range(limit):
			if b == a:
				return True
			if b not in self.immediate_dominators:
				return False
			b = self.immediate_dominators[b]
		raise AssertionError('cycle in immediate dominator map')

def tree_from_idoms(idoms):
	'''
	Convert immediate dominator map into a dominator tree structure.

	The dominator tree is represented as a dictionary mapping each dominator
	to a list of nodes it directly dominates.

	>>> tree_from_idoms({'b': 'a', 'c': 'a', 'd': 'c'}) == {'a': ['b', 'c'], 'c': ['d']}
	True
	'''
	tree = {}

	for node, idom in idoms.items():
		if idom not in tree:
			tree[idom] = [node]
		else:
			tree[idom].append(node)

	return tree

def compute_dominators(graph, root=None, host=None):
	'''
	Run ``LengauerTarjanDominators`` and return the finished algorithm, whose
	``semidominators``, ``immediate_dominators`` and ``time_stamps`` hold
	the results.
	'''
	alg = LengauerTarjanDominators(graph, host=host)
	alg.compute(root)
	return alg
