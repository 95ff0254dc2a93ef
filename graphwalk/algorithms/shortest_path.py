
import contextlib
import functools

from graphwalk.algorithms.base import RootedAlgorithmBase, ComputationState
from graphwalk.algorithms.events import Color
from graphwalk.algorithms.heap import VertexPriorityQueue
from graphwalk.algorithms.observers import Observer, attach, VertexPredecessorRecorder, try_get_path
from graphwalk.algorithms.roots import select_roots
from graphwalk.algorithms.search import BreadthFirstSearch, DIRECTED, UNDIRECTED, resolve_access, event_names
from graphwalk.config import Config

__all__ = [
	'DijkstraVisitor',
	'ShortestPathAlgorithm',
	'ShortestPathResult',
	'dijkstra_shortest_paths',
	'undirected_dijkstra_shortest_paths',
]

class DijkstraVisitor:
	def initialize_vertex(self, g, v):
		''' Invoked on every vertex before the computation begins. '''
		pass

	def start_vertex(self, g, v):
		''' Invoked on the root of each shortest path tree. '''
		pass

	def discover_vertex(self, g, v):
		''' Invoked on a vertex when it is first reached (including roots). '''
		pass

	def examine_vertex(self, g, v):
		''' Invoked on a vertex when popped from the queue; its distance is now final. '''
		pass

	def examine_edge(self, g, e, source):
		''' Invoked on all out-edges of a vertex. '''
		pass

	def tree_edge(self, g, e, source):
		''' Invoked when an edge improves the distance of its target. '''
		pass

	def edge_not_relaxed(self, g, e, source):
		''' Invoked when an edge does not improve the distance of its target.

		Edges into finished vertices land here too, as long as they could not
		have improved the (already final) distance. '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined. '''
		pass

class ShortestPathAlgorithm(RootedAlgorithmBase):
	'''
	Single-source shortest paths, Dijkstra style, for directed or undirected graphs.

	A breadth-first search is driven with a priority queue ordered by the
	relaxer; relaxation happens in response to the search's ``tree_edge`` and
	``gray_target`` events.  Which edges are followed out of a vertex is
	decided by ``access`` (``DIRECTED`` or ``UNDIRECTED``, matching the
	graph), which is the only difference between the two flavors.

	Without a root, every vertex still unvisited (in graph order) becomes the
	root of its own tree.

	Preconditions which are NOT checked: no edge weight may be "improving"
	under the relaxer, i.e. ``combine(d, w)`` is never better than ``d``.
	For ``ShortestDistanceRelaxer`` all weights must be >= 0; for
	``LongestDistanceRelaxer`` all weights must be <= 0.  Violating this gives
	meaningless distances.
	'''
	EVENTS = event_names(DijkstraVisitor)

	def __init__(self, graph, edge_weights, relaxer=None, access=None, host=None, config=None):
		super().__init__(graph, host)
		if edge_weights is None:
			raise ValueError('edge_weights cannot be None')
		if not callable(edge_weights):
			raise TypeError('edge_weights must be callable; got {!r}'.format(edge_weights))

		self._config = Config() if config is None else config
		self._edge_weights = edge_weights
		self._relaxer = self._config.make_relaxer() if relaxer is None else relaxer
		self._access = resolve_access(graph, access)
		self._verify_heap = self._config.get_verify_heap()

		self._colors = None
		self._distances = None
		self._queue = None

	@property
	def relaxer(self):
		return self._relaxer

	@property
	def colors(self):
		return self._colors

	@property
	def distances(self):
		''' Distances of the vertices reached by the last computation. '''
		if self._distances is None:
			return {}
		return {v:d for (v,d) in self._distances.items() if self._colors[v] is not Color.WHITE}

	def distance(self, v):
		''' Distance of ``v``; the relaxer's initial distance if it was not reached. '''
		if not self._graph.has_vertex(v):
			raise ValueError('vertex {!r} is not in the graph'.format(v))
		if self._distances is None:
			return self._relaxer.initial_distance
		return self._distances[v]

	def _initialize(self):
		g = self._graph
		initial = self._relaxer.initial_distance

		self._colors = {}
		self._distances = {}
		for v in g.vertices():
			self._colors[v] = Color.WHITE
			self._distances[v] = initial
			self._fire('initialize_vertex', g, v)

		self._queue = VertexPriorityQueue(self._distances.__getitem__, self._relaxer.is_better)

	def _is_white(self, v):
		return self._colors[v] is Color.WHITE

	def _internal_compute(self):
		g = self._graph
		self._log.debug('shortest paths over %r (root: %r, relaxer: %r, access: %r)',
			g, self.root_vertex(), self._relaxer, self._access)

		bfs = BreadthFirstSearch(g, host=self, queue=self._queue, colors=self._colors, access=self._access)
		with attach(_BfsRelay(self), bfs):
			for root in select_roots(g, self._is_white, self.root_vertex()):
				if self.is_cancelling():
					return
				self.compute_from_root(bfs, root)

		self._log.debug('shortest paths reached %d of %d vertices',
			len(self.distances), g.num_vertices())

	def compute_from_root(self, bfs, root):
		''' Grow one shortest path tree.  ``root`` must not have been visited yet. '''
		if self._colors.get(root) is not Color.WHITE:
			raise RuntimeError('cannot compute from {!r}: it is not unvisited (color: {})'.format(
				root, self._colors.get(root)))

		self._distances[root] = 0.0
		self._fire('start_vertex', self._graph, root)
		bfs.visit(root)

	def _relax(self, g, e, source, target):
		d = self._distances
		candidate = self._relaxer.combine(d[source], self._edge_weights(e))
		if self._relaxer.is_better(candidate, d[target]):
			d[target] = candidate
			return True
		return False

	def _on_tree_edge(self, g, e, source):
		target = self._access.target(g, e, source)
		if self._relax(g, e, source, target):
			self._fire('tree_edge', g, e, source)
		else:
			self._fire('edge_not_relaxed', g, e, source)

	def _on_gray_target(self, g, e, source):
		target = self._access.target(g, e, source)
		if self._relax(g, e, source, target):
			# the vertex being examined is gray but no longer queued (self-loops)
			if target in self._queue:
				self._queue.update(target)
			if self._verify_heap:
				self._queue.check_invariant()
			self._fire('tree_edge', g, e, source)
		else:
			self._fire('edge_not_relaxed', g, e, source)

	def _on_black_target(self, g, e, source):
		# a finished vertex is never relaxed again; an edge that would improve it
		#  can only come from a violated weight precondition, and fires nothing
		d = self._distances
		target = self._access.target(g, e, source)
		candidate = self._relaxer.combine(d[source], self._edge_weights(e))
		if not self._relaxer.is_better(candidate, d[target]):
			self._fire('edge_not_relaxed', g, e, source)

	def _on_examine_edge(self, g, e, source):
		self._queue.check_invariant()
		self._fire('examine_edge', g, e, source)

class _BfsRelay(Observer):
	''' Connects a ShortestPathAlgorithm to the search that drives it. '''
	FORWARDED = ('discover_vertex', 'examine_vertex', 'examine_edge', 'finish_vertex')

	def __init__(self, owner):
		self.owner = owner

	def handlers(self, bfs):
		owner = self.owner
		d = {name:functools.partial(owner._fire, name) for name in self.FORWARDED}
		if owner._verify_heap:
			d['examine_edge'] = owner._on_examine_edge
		d['tree_edge'] = owner._on_tree_edge
		d['gray_target'] = owner._on_gray_target
		d['black_target'] = owner._on_black_target
		return d

class ShortestPathResult:
	'''
	Distances and predecessors produced by a shortest path computation.

	Unpacks as ``(distances, predecessors)``.  If ``aborted`` is set, the
	computation was cancelled and the maps are incomplete.
	'''
	def __init__(self, graph, distances, predecessors, aborted=False):
		self.graph = graph
		self.distances = distances
		self.predecessors = predecessors
		self.aborted = aborted

	def __iter__(self):
		return iter((self.distances, self.predecessors))

	def try_get_path(self, v):
		''' List of edges from the root to ``v``, or ``None``. '''
		return try_get_path(self.predecessors, self.graph, v)

	def __repr__(self):
		return '<ShortestPathResult: {} vertices reached{}>'.format(
			len(self.distances), ' (aborted)' if self.aborted else '')

def _shortest_paths(graph, edge_weights, root, relaxer, access, host, config, observers):
	alg = ShortestPathAlgorithm(graph, edge_weights, relaxer=relaxer, access=access, host=host, config=config)
	recorder = VertexPredecessorRecorder()
	with contextlib.ExitStack() as stack:
		for observer in [recorder] + list(observers):
			stack.enter_context(attach(observer, alg))
		alg.compute(root)
	aborted = alg.state is ComputationState.ABORTED
	return ShortestPathResult(graph, alg.distances, recorder.predecessors, aborted)

def dijkstra_shortest_paths(graph, edge_weights, root=None, relaxer=None, host=None, config=None, observers=()):
	'''
	Shortest paths over a directed graph.

	``edge_weights`` is a function of an edge.  With no ``root``, paths are
	computed from a root in every component.  Extra ``observers`` are
	attached for the duration of the computation.

	>>> from graphwalk.graph import DirectedGraph, edge_weights
	>>> g = DirectedGraph()
	>>> _ = g.add_path('abc', weight=1.0)
	>>> distances, predecessors = dijkstra_shortest_paths(g, edge_weights(g), 'a')
	>>> distances == {'a': 0.0, 'b': 1.0, 'c': 2.0}
	True
	'''
	if graph is None:
		raise ValueError('graph cannot be None')
	if not graph.is_directed():
		raise ValueError('graph is undirected; use undirected_dijkstra_shortest_paths')
	return _shortest_paths(graph, edge_weights, root, relaxer, DIRECTED, host, config, observers)

def undirected_dijkstra_shortest_paths(graph, edge_weights, root=None, relaxer=None, host=None, config=None, observers=()):
	'''
	Shortest paths over an undirected graph.

	Every edge event reports the endpoint it was traversed from as ``source``.
	'''
	if graph is None:
		raise ValueError('graph cannot be None')
	if graph.is_directed():
		raise ValueError('graph is directed; use dijkstra_shortest_paths')
	return _shortest_paths(graph, edge_weights, root, relaxer, UNDIRECTED, host, config, observers)
