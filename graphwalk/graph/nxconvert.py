
import networkx as nx

from .basegraph import DirectedGraph, UndirectedGraph

__all__ = [
	'from_networkx',
	'to_networkx',
]

def from_networkx(g):
	'''
	Copy a ``networkx`` graph into a ``DirectedGraph`` or ``UndirectedGraph``.

	Node order is preserved (it becomes the iteration order seen by the
	algorithms), and edge attributes are copied onto the new edges.
	Multigraphs are supported; each parallel edge gets its own id.

	>>> import networkx as nx
	>>> nxg = nx.DiGraph()
	>>> nxg.add_edge('a', 'b', weight=3.0)
	>>> g = from_networkx(nxg)
	>>> e, = g.edges()
	>>> g.edge_endpoints(e), g.edge_attribute(e, 'weight')
	(('a', 'b'), 3.0)
	'''
	out = DirectedGraph() if g.is_directed() else UndirectedGraph()
	out.add_vertices(g.nodes())

	if g.is_multigraph():
		edges = g.edges(keys=False, data=True)
	else:
		edges = g.edges(data=True)

	for s,t,data in edges:
		out.add_edge(s, t, **data)
	return out

def to_networkx(graph):
	'''
	Copy a graph (anything providing the graph protocol used by the
	algorithms) into a ``networkx`` multigraph, keyed by edge id.
	Edge attributes are copied when the graph provides them.
	'''
	cls = nx.MultiDiGraph if graph.is_directed() else nx.MultiGraph
	g = cls()
	g.add_nodes_from(graph.vertices())
	for e in graph.edges():
		s,t = graph.edge_endpoints(e)
		attrs = graph.edge_attributes(e) if hasattr(graph, 'edge_attributes') else {}
		g.add_edge(s, t, key=e, **attrs)
	return g
