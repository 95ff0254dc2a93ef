
import collections

from graphwalk.algorithms.base import RootedAlgorithmBase
from graphwalk.algorithms.events import Color
from graphwalk.algorithms.observers import attach, VisitorObserver, VertexPredecessorRecorder
from graphwalk.algorithms.roots import select_roots
from graphwalk.util import unlimited_range

__all__ = [
	'BfsVisitor',
	'DfsVisitor',
	'EdgeAccess',
	'DIRECTED',
	'UNDIRECTED',
	'default_access',
	'resolve_access',
	'event_names',
	'BreadthFirstSearch',
	'DepthFirstSearch',
	'bfs_rooted',
	'bfs_full',
	'dfs_rooted',
	'dfs_full',
	'spanning_forest',
]

# Vertex events are invoked as ``f(g, v)``; edge events as ``f(g, e, source)``,
#  where ``source`` is the vertex the edge is being traversed from.  On an
#  undirected graph, ``source`` is the only record of the direction of travel.

class BfsVisitor:
	def initialize_vertex(self, g, v):
		''' Invoked on every vertex before the search begins. '''
		pass

	def start_vertex(self, g, v):
		''' Invoked on the root of a bfs tree. '''
		pass

	def discover_vertex(self, g, v):
		''' Invoked on a vertex when it is first reached (including roots). '''
		pass

	def examine_vertex(self, g, v):
		''' Invoked on a vertex when popped from the queue. '''
		pass

	def examine_edge(self, g, e, source):
		''' Invoked on all out-edges of a vertex. '''
		pass

	def tree_edge(self, g, e, source):
		''' Invoked when an edge leads to an unvisited vertex (before it is queued). '''
		pass

	def non_tree_edge(self, g, e, source):
		''' Invoked when an edge leads to a vertex that was already discovered. '''
		pass

	def gray_target(self, g, e, source):
		''' Invoked after ``non_tree_edge`` if the target is still in the queue. '''
		pass

	def black_target(self, g, e, source):
		''' Invoked after ``non_tree_edge`` if the target is finished. '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined. '''
		pass

class DfsVisitor:
	def initialize_vertex(self, g, v):
		''' Invoked on every vertex before the search begins. '''
		pass

	def start_vertex(self, g, v):
		''' Invoked on the root of a dfs tree. '''
		pass

	def discover_vertex(self, g, v):
		''' Invoked on a vertex when it is first reached (including roots). '''
		pass

	def examine_edge(self, g, e, source):
		''' Invoked on every edge followed out of a vertex. '''
		pass

	def tree_edge(self, g, e, source):
		''' Invoked when a tree edge is examined. '''
		pass

	def non_tree_edge(self, g, e, source):
		''' Invoked when a back, forward, or cross-edge is examined.

		On undirected graphs, this will NOT be invoked on tree edges when they
		are examined backwards. '''
		pass

	def back_edge(self, g, e, source):
		''' Invoked after ``non_tree_edge`` when the target is an ancestor. '''
		pass

	def forward_edge(self, g, e, source):
		''' Invoked after ``non_tree_edge`` when the target is a finished descendant.

		Never invoked on undirected graphs. '''
		pass

	def cross_edge(self, g, e, source):
		''' Invoked after ``non_tree_edge`` when the target is finished and unrelated.

		Never invoked on undirected graphs. '''
		pass

	def finish_edge(self, g, e, source):
		''' Invoked when retracing a tree edge after finishing a vertex.

		`source` is the original source vertex (not the vertex we just finished). '''
		pass

	def finish_vertex(self, g, v):
		''' Invoked after all edges of a vertex have been examined. '''
		pass

def event_names(cls):
	return tuple(k for k in cls.__dict__ if not k.startswith('_'))

class EdgeAccess:
	'''
	Which edges a traversal follows out of a vertex.

	``DIRECTED`` follows out-edges only; ``UNDIRECTED`` follows every
	incident edge, in whichever orientation leaves the vertex.
	'''
	def __init__(self, name, edges_from):
		self.name = name
		self._edges_from = edges_from

	def edges_from(self, g, v):
		return self._edges_from(g, v)

	def target(self, g, e, source):
		return g.edge_target_given_source(e, source)

	def __repr__(self):
		return '<EdgeAccess {}>'.format(self.name)

DIRECTED   = EdgeAccess('directed',   lambda g, v: g.out_edges(v))
UNDIRECTED = EdgeAccess('undirected', lambda g, v: g.incident_edges(v))

def default_access(graph):
	return DIRECTED if graph.is_directed() else UNDIRECTED

def resolve_access(graph, access=None):
	''' The edge access to use on ``graph``.

	An explicit ``access`` must agree with the directedness of the graph; a
	directed graph has no way to walk its in-edges "forwards". '''
	expected = default_access(graph)
	if access is None:
		return expected
	if access is not expected:
		raise ValueError('{!r} cannot be used on {!r}'.format(access, graph))
	return access

class _FifoQueue:
	def __init__(self):
		self._items = collections.deque()
	def __len__(self):
		return len(self._items)
	def push(self, v):
		self._items.append(v)
	def pop(self):
		return self._items.popleft()

class BreadthFirstSearch(RootedAlgorithmBase):
	'''
	Breadth-first search over a directed or undirected graph.

	``queue`` may replace the usual FIFO with anything providing ``push``,
	``pop`` and ``__len__`` (the shortest path algorithms supply a priority
	queue).  ``colors`` may be a dict owned by the caller, in which case the
	caller can drive the search one root at a time through ``visit``.

	After ``compute``, ``colors`` maps every vertex to its final ``Color``.
	'''
	EVENTS = event_names(BfsVisitor)

	def __init__(self, graph, host=None, queue=None, colors=None, access=None):
		super().__init__(graph, host)
		self._access = resolve_access(graph, access)
		self._owns_queue = queue is None
		self._owns_colors = colors is None
		self._queue = _FifoQueue() if queue is None else queue
		self.colors = colors

	def _initialize(self):
		if self._owns_colors:
			self.colors = {}
		if self._owns_queue:
			self._queue = _FifoQueue()

		g = self._graph
		for v in g.vertices():
			self.colors[v] = Color.WHITE
			self._fire('initialize_vertex', g, v)

	def _is_white(self, v):
		return self.colors[v] is Color.WHITE

	def _internal_compute(self):
		g = self._graph
		self._log.debug('bfs over %r (root: %r)', g, self.root_vertex())
		for root in select_roots(g, self._is_white, self.root_vertex()):
			if self.is_cancelling():
				return
			self._fire('start_vertex', g, root)
			self.visit(root)

	def visit(self, root):
		''' Search from ``root``, which must not have been visited yet. '''
		if self.colors is None:
			raise RuntimeError('visit() requires a color map; call compute() or supply colors')
		if self.colors.get(root) is not Color.WHITE:
			raise RuntimeError('cannot visit from {!r}: it is not unvisited (color: {})'.format(
				root, self.colors.get(root)))

		g = self._graph
		fire = self._fire
		colors = self.colors
		queue = self._queue
		access = self._access

		colors[root] = Color.GRAY
		fire('discover_vertex', g, root)
		queue.push(root)

		while len(queue) > 0:
			if self.is_cancelling():
				return
			v = queue.pop()
			fire('examine_vertex', g, v)

			for e in access.edges_from(g, v):
				if self.is_cancelling():
					return

				target = access.target(g, e, v)
				fire('examine_edge', g, e, v)

				color = colors[target]
				if color is Color.WHITE:
					# tree_edge comes first so that handlers may set up the
					#  target's priority before it is queued
					fire('tree_edge', g, e, v)
					colors[target] = Color.GRAY
					fire('discover_vertex', g, target)
					queue.push(target)
				else:
					fire('non_tree_edge', g, e, v)
					if color is Color.GRAY:
						fire('gray_target', g, e, v)
					else:
						fire('black_target', g, e, v)

			colors[v] = Color.BLACK
			fire('finish_vertex', g, v)

class DepthFirstSearch(RootedAlgorithmBase):
	'''
	Depth-first search over a directed or undirected graph.

	Every vertex gets a discover time and a finish time from a single clock,
	so ``a`` is an ancestor of ``b`` in the dfs forest exactly when ``a``'s
	interval contains ``b``'s (see ``is_ancestor``).
	'''
	EVENTS = event_names(DfsVisitor)

	def __init__(self, graph, host=None, access=None):
		super().__init__(graph, host)
		self._access = resolve_access(graph, access)
		self.colors = None
		self.discover_times = None
		self.finish_times = None

	def _initialize(self):
		self.colors = {}
		self.discover_times = {}
		self.finish_times = {}
		self._clock = unlimited_range()

		g = self._graph
		for v in g.vertices():
			self.colors[v] = Color.WHITE
			self._fire('initialize_vertex', g, v)

	def _is_white(self, v):
		return self.colors[v] is Color.WHITE

	def _internal_compute(self):
		g = self._graph
		self._log.debug('dfs over %r (root: %r)', g, self.root_vertex())
		for root in select_roots(g, self._is_white, self.root_vertex()):
			if self.is_cancelling():
				return
			self._fire('start_vertex', g, root)
			self.visit(root)

	def is_ancestor(self, a, b):
		''' Is ``a`` an ancestor of ``b`` (or ``b`` itself) in the dfs forest?

		Only meaningful for finished vertices. '''
		if a not in self.finish_times or b not in self.finish_times:
			return False
		return (self.discover_times[a] <= self.discover_times[b]
			and self.finish_times[b] <= self.finish_times[a])

	def _discover(self, v):
		self.colors[v] = Color.GRAY
		self.discover_times[v] = next(self._clock)
		self._fire('discover_vertex', self._graph, v)

	def visit(self, root):
		''' Search from ``root``, which must not have been visited yet. '''
		if self.colors is None:
			raise RuntimeError('visit() requires initialization; call compute()')
		if self.colors.get(root) is not Color.WHITE:
			raise RuntimeError('cannot visit from {!r}: it is not unvisited (color: {})'.format(
				root, self.colors.get(root)))

		# Written in an iterative fashion due to Python's limited support for recursion.
		# Here be dragons

		g = self._graph
		fire = self._fire
		colors = self.colors
		access = self._access
		undirected = access is UNDIRECTED

		self._discover(root)

		# stack contains:
		# (src_edge, vertex, out_edge_iter)
		stack = [(None, root, iter(access.edges_from(g, root)))]

		while len(stack) > 0:
			if self.is_cancelling():
				return

			(src_edge, v, out_edges) = stack[-1]

			# Get one edge
			try: e = next(out_edges)

			# No edge found
			except StopIteration:
				colors[v] = Color.BLACK
				self.finish_times[v] = next(self._clock)
				fire('finish_vertex', g, v)

				if src_edge is not None:
					source = g.edge_source_given_target(src_edge, v)
					fire('finish_edge', g, src_edge, source)

				# Return to previous vertex
				stack.pop()
				continue

			# Ignore the edge that brought us here (for undirected graphs)
			if e == src_edge:
				continue

			target = access.target(g, e, v)
			fire('examine_edge', g, e, v)

			color = colors[target]
			if color is Color.WHITE:
				fire('tree_edge', g, e, v)
				self._discover(target)

				# Visit target on next iteration
				stack.append((e, target, iter(access.edges_from(g, target))))

			elif color is Color.GRAY:
				fire('non_tree_edge', g, e, v)
				fire('back_edge', g, e, v)

			else:
				fire('non_tree_edge', g, e, v)
				# on an undirected graph this is a back edge seen from its other end
				if undirected:
					continue
				if self.discover_times[target] > self.discover_times[v]:
					fire('forward_edge', g, e, v)
				else:
					fire('cross_edge', g, e, v)

# Makes a visitor, overriding its member methods with functions provided by cb_dict.
def _make_visitor(cls, cb_dict):
	obj = cls()
	for k,v in cb_dict.items():
		if k not in cls.__dict__:
			raise KeyError('cannot override method {}; no such method'.format(k))
		obj.__dict__[k] = v
	return obj

# Handles the visitor and **callbacks arguments, either by returning the visitor,
#  or by constructing one from the callbacks.
def visitor_from_visitor_args(cls, visitor, callbacks):
	if visitor is None:
		visitor = _make_visitor(cls, callbacks)
	elif len(callbacks) > 0:
		raise RuntimeError('Received both a visitor and callbacks!')

	return visitor

def _run(alg, visitor, root):
	with attach(VisitorObserver(visitor), alg):
		alg.compute(root)
	return alg

def bfs_rooted(graph, root, visitor=None, **callbacks):
	''' Breadth-first search from ``root``.  Returns the set of visited vertices. '''
	if root is None:
		raise ValueError('root vertex cannot be None')
	visitor = visitor_from_visitor_args(BfsVisitor, visitor, callbacks)
	bfs = _run(BreadthFirstSearch(graph), visitor, root)
	return {v for (v,c) in bfs.colors.items() if c is not Color.WHITE}

def bfs_full(graph, visitor=None, **callbacks):
	''' Breadth-first search of every component. '''
	visitor = visitor_from_visitor_args(BfsVisitor, visitor, callbacks)
	_run(BreadthFirstSearch(graph), visitor, None)

def dfs_rooted(graph, root, visitor=None, **callbacks):
	''' Depth-first search from ``root``.  Returns the set of visited vertices. '''
	if root is None:
		raise ValueError('root vertex cannot be None')
	visitor = visitor_from_visitor_args(DfsVisitor, visitor, callbacks)
	dfs = _run(DepthFirstSearch(graph), visitor, root)
	return {v for (v,c) in dfs.colors.items() if c is not Color.WHITE}

def dfs_full(graph, visitor=None, **callbacks):
	''' Depth-first search of every component. '''
	visitor = visitor_from_visitor_args(DfsVisitor, visitor, callbacks)
	_run(DepthFirstSearch(graph), visitor, None)

def spanning_forest(graph):
	''' Returns an arbitrary spanning tree forest as a dict of {v: edgeFromParent}

	The root of each tree is omitted from the dict.  For a directed graph,
	each tree only contains vertices reachable from its root. '''
	bfs = BreadthFirstSearch(graph)
	with attach(VertexPredecessorRecorder(), bfs) as recorder:
		bfs.compute()
	return recorder.predecessors
