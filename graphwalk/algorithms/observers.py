
import contextlib
from abc import ABCMeta, abstractmethod

from graphwalk.util import unlimited_range

__all__ = [
	'Observer',
	'attach',
	'VisitorObserver',
	'VertexPredecessorRecorder',
	'VertexDistanceRecorder',
	'VertexTimeStamper',
	'VertexRecorder',
	'try_get_path',
]

class Observer(metaclass=ABCMeta):
	'''
	Something that listens to an algorithm's events.

	Observers don't subscribe themselves; use ``attach``, which guarantees
	that they are detached again.
	'''
	@abstractmethod
	def handlers(self, algorithm):
		''' Get a ``dict`` of ``{event_name: handler}`` for ``algorithm``. '''
		pass

@contextlib.contextmanager
def attach(observer, algorithm):
	'''
	Subscribe ``observer`` to ``algorithm`` for the duration of a ``with`` block.

	Exactly the handlers subscribed on entry are unsubscribed on exit, however
	the block is left.  Other observers are unaffected, and attaching the
	same observer twice simply subscribes it twice.

	>>> from graphwalk.graph import DirectedGraph
	>>> from graphwalk.algorithms.search import BreadthFirstSearch
	>>> g = DirectedGraph()
	>>> g.add_path('abc')
	[0, 1]
	>>> bfs = BreadthFirstSearch(g)
	>>> with attach(VertexPredecessorRecorder(), bfs) as recorder:
	...     bfs.compute('a')
	>>> sorted(recorder.predecessors.items())
	[('b', 0), ('c', 1)]
	>>> bfs.events.has_subscribers('tree_edge')
	False
	'''
	handlers = list(observer.handlers(algorithm).items())
	attached = []
	try:
		for name, handler in handlers:
			algorithm.events.subscribe(name, handler)
			attached.append((name, handler))
		yield observer
	finally:
		for name, handler in reversed(attached):
			algorithm.events.unsubscribe(name, handler)

class VisitorObserver(Observer):
	'''
	Adapts a visitor object (see ``BfsVisitor`` and friends) into an observer.

	Every method of the visitor named after one of the algorithm's events is
	subscribed to that event.
	'''
	def __init__(self, visitor):
		self.visitor = visitor

	def handlers(self, algorithm):
		d = {}
		for name in algorithm.events.names():
			method = getattr(self.visitor, name, None)
			if method is not None:
				d[name] = method
		return d

class VertexPredecessorRecorder(Observer):
	'''
	Records, for each vertex, the tree edge that reached it.

	A later tree edge into the same vertex replaces the earlier one, which is
	what the shortest path algorithms rely on (their ``tree_edge`` means "this
	edge improved the distance").
	'''
	def __init__(self, predecessors=None):
		self.predecessors = {} if predecessors is None else predecessors

	def handlers(self, algorithm):
		return {'tree_edge': self._on_tree_edge}

	def _on_tree_edge(self, g, e, source):
		self.predecessors[g.edge_target_given_source(e, source)] = e

	def try_get_path(self, graph, v):
		return try_get_path(self.predecessors, graph, v)

class VertexDistanceRecorder(Observer):
	'''
	Records the distance of each vertex along the tree edges of a traversal.

	Roots get distance 0.  ``edge_weights`` defaults to counting edges.
	'''
	def __init__(self, edge_weights=None, relaxer=None, distances=None):
		# deferred; relaxers does not depend on the observers
		from graphwalk.algorithms.relaxers import ShortestDistanceRelaxer

		self.edge_weights = edge_weights if edge_weights is not None else (lambda e: 1.0)
		self.relaxer = relaxer if relaxer is not None else ShortestDistanceRelaxer()
		self.distances = {} if distances is None else distances

	def handlers(self, algorithm):
		return {
			'start_vertex': self._on_start_vertex,
			'tree_edge': self._on_tree_edge,
		}

	def _on_start_vertex(self, g, v):
		self.distances[v] = 0.0

	def _on_tree_edge(self, g, e, source):
		target = g.edge_target_given_source(e, source)
		base = self.distances.get(source, self.relaxer.initial_distance)
		self.distances[target] = self.relaxer.combine(base, self.edge_weights(e))

class VertexTimeStamper(Observer):
	'''
	Numbers vertices in discovery order (0, 1, 2, ...), and optionally in
	finish order as well.
	'''
	def __init__(self, discover_times=None, finish_times=None, record_finish=False):
		self.discover_times = {} if discover_times is None else discover_times
		self.finish_times = {} if finish_times is None else finish_times
		self.record_finish = record_finish
		self._discover_clock = unlimited_range()
		self._finish_clock = unlimited_range()

	def handlers(self, algorithm):
		d = {'discover_vertex': self._on_discover_vertex}
		if self.record_finish:
			d['finish_vertex'] = self._on_finish_vertex
		return d

	def _on_discover_vertex(self, g, v):
		self.discover_times[v] = next(self._discover_clock)

	def _on_finish_vertex(self, g, v):
		self.finish_times[v] = next(self._finish_clock)

class VertexRecorder(Observer):
	''' Records vertices in the order an event sees them (``discover_vertex`` by default). '''
	def __init__(self, event='discover_vertex', vertices=None):
		self.event = event
		self.vertices = [] if vertices is None else vertices

	def handlers(self, algorithm):
		return {self.event: self._on_vertex}

	def _on_vertex(self, g, v):
		self.vertices.append(v)

def try_get_path(predecessors, graph, v):
	'''
	Walk a predecessor map from ``v`` back to its root.

	Returns the list of edges from the root to ``v``, or ``None`` if ``v``
	has no predecessor (it was never reached, or it is a root).  The walk gives up
	and returns ``None`` if it takes more steps than there are vertices, as
	only a cycle in the map could cause that.

	``graph`` is only used to find the source of each edge.
	'''
	if v not in predecessors:
		return None

	limit = graph.num_vertices()
	path = []
	while v in predecessors:
		if len(path) >= limit:
			return None
		e = predecessors[v]
		path.append(e)
		v = graph.edge_source_given_target(e, v)

	path.reverse()
	return path

