
from graphwalk.util import window2

__all__ = [
	'DirectedGraph',
	'UndirectedGraph',
	'edge_weights',
]

# Edges are plain integer ids handed out by ``add_edge``.  Anything that
#  wants to know where an edge goes must ask the graph.
#
# Adjacency "sets" are dicts with None values; they keep insertion order,
#  which is the graph's natural iteration order seen by the algorithms.

# For methods which are not affected by directedness
# (or which are currently written in a directed-agnostic manner)
class AdjacencyListBase:

	def __init__(self):
		self._next_e = 0

		self._adj = {}  # dict of ordered "sets" of edges
		self._edge_endpoints = {}
		self._edge_attributes = {}

	def num_vertices(self):
		return len(self._adj)

	def num_edges(self):
		return len(self._edge_endpoints)

	def vertices(self):
		return iter(self._adj)

	def edges(self):
		return iter(self._edge_endpoints)

	def edge_endpoints(self, e):
		return self._edge_endpoints[e]

	def edge_attribute(self, e, attr):
		return self._edge_attributes[e][attr]

	def edge_attributes(self, e):
		return dict(self._edge_attributes[e])

	def has_vertex(self, v):
		return v in self._adj

	def has_edge_id(self, e):
		return e in self._edge_endpoints

	def add_vertices(self, vs):
		vs = list(vs)

		if len(vs) != len(set(vs)):
			raise ValueError('vertex specified multiple times')

		for v in vs:
			if v is None:
				raise ValueError('None cannot be used as a vertex')
			if self.has_vertex(v):
				raise ValueError('Vertex {} already in graph!'.format(repr(v)))

		for v in vs:
			self._init_vertex(v)

	def add_vertex(self, v):
		self.add_vertices([v])

	def add_edge(self, v1, v2, **kwargs):
		''' Add an edge from ``v1`` to ``v2`` and return its id.

		Missing endpoints are added to the graph.  Keyword arguments are
		stored as edge attributes (e.g. ``weight``). '''
		for v in (v1, v2):
			if v is None:
				raise ValueError('None cannot be used as a vertex')
			if not self.has_vertex(v):
				self._init_vertex(v)

		e = self._next_e
		self._next_e += 1

		self._edge_endpoints[e] = (v1,v2)
		self._edge_attributes[e] = dict(kwargs)
		self._link_edge(e, v1, v2)
		return e

	def add_path(self, vs, **kwargs):
		''' Connect consecutive vertices of ``vs``.  Returns the new edge ids. '''
		return [self.add_edge(s, t, **kwargs) for (s,t) in window2(vs)]

	def all_edges(self, v1, v2):
		result = []
		for e in self.out_edges(v1):
			if self.edge_target_given_source(e,v1) == v2:
				result.append(e)
		return result

	def arbitrary_edge(self, v1, v2):
		es = self.all_edges(v1, v2)
		if not es:
			raise ValueError('no edge from {!r} to {!r}'.format(v1, v2))
		return es[0]

	def __repr__(self):
		return '<{} with {} vertices and {} edges>'.format(
			type(self).__name__, self.num_vertices(), self.num_edges())

class DirectedGraph(AdjacencyListBase):
	'''
	A directed multigraph which also indexes in-edges.

	``_adj`` holds out-edges; ``_in_adj`` holds in-edges.

	>>> g = DirectedGraph()
	>>> e = g.add_edge('a', 'b', weight=2.0)
	>>> g.edge_endpoints(e)
	('a', 'b')
	>>> list(g.in_edges('b')) == [e]
	True
	'''
	def __init__(self):
		super().__init__()
		self._in_adj = {}

	def is_directed(self):
		return True

	def _init_vertex(self, v):
		self._adj[v] = {}
		self._in_adj[v] = {}

	def _link_edge(self, e, v1, v2):
		self._adj[v1][e] = None
		self._in_adj[v2][e] = None

	def out_edges(self, v):
		return iter(self._adj[v])
	def in_edges(self, v):
		return iter(self._in_adj[v])
	def incident_edges(self, v):
		# a self-loop is reported once
		return iter(dict.fromkeys(list(self._adj[v]) + list(self._in_adj[v])))

	def edge_target_given_source(self, e, v):
		source,target = self.edge_endpoints(e)
		if v != source:
			raise ValueError('vertex {} cannot be the source of edge'
				' {} (which connects {} to {})'.format(v,e,source,target))
		return target

	def edge_source_given_target(self, e, v):
		source,target = self.edge_endpoints(e)
		if v != target:
			raise ValueError('vertex {} cannot be the target of edge'
				' {} (which connects {} to {})'.format(v,e,source,target))
		return source

# Methods which must change to take directedness into account (keep this list small)
class UndirectedGraph(AdjacencyListBase):

	def is_directed(self):
		return False

	def _init_vertex(self, v):
		self._adj[v] = {}

	def _link_edge(self, e, v1, v2):
		self._adj[v1][e] = None
		self._adj[v2][e] = None

	def incident_edges(self, v):
		return iter(self._adj[v])
	def in_edges(self, v):
		return iter(self._adj[v])
	def out_edges(self, v):
		return iter(self._adj[v])

	def _edge_other_endpoint_impl(self, e, v, name='an endpoint'):
		source,target = self.edge_endpoints(e)
		if   v == source:
			return target
		elif v == target:
			return source
		else:
			raise ValueError('vertex {} cannot be {} of edge'
				' {} (which connects {} to {})'.format(v,name,e,source,target))

	def edge_target_given_source(self, e, v):
		return self._edge_other_endpoint_impl(e, v, 'the source')

	def edge_source_given_target(self, e, v):
		return self._edge_other_endpoint_impl(e, v, 'the target')

_NO_DEFAULT = object()

def edge_weights(graph, attr='weight', default=_NO_DEFAULT):
	'''
	Make an edge weight function reading the attribute ``attr``.

	Edges lacking the attribute get ``default``; if no default is given,
	they raise ``KeyError`` when weighed.
	'''
	def weight(e):
		try:
			return float(graph.edge_attribute(e, attr))
		except KeyError:
			if default is _NO_DEFAULT:
				raise
			return float(default)
	return weight
