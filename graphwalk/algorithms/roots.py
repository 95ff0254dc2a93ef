
__all__ = [
	'select_roots',
]

def select_roots(graph, is_unvisited, root=None):
	'''
	Produce the roots a computation should start from.

	With an explicit ``root``, that vertex is the only root.  Otherwise every
	vertex of ``graph`` is considered in iteration order, and yielded if
	``is_unvisited(v)`` holds *at the moment it is reached*; vertices claimed
	by the traversal of an earlier root are thereby skipped, giving one root
	per component.

	The explicit root is validated immediately, not when iteration begins.

	>>> from graphwalk.graph import DirectedGraph
	>>> g = DirectedGraph()
	>>> g.add_vertices('abc')
	>>> visited = set()
	>>> for r in select_roots(g, lambda v: v not in visited):
	...     visited.update('ab')
	...     print(r)
	a
	c
	'''
	if root is not None:
		if not graph.has_vertex(root):
			raise ValueError('root vertex {!r} is not in the graph'.format(root))
		return iter((root,))
	return _lazy_roots(graph, is_unvisited)

def _lazy_roots(graph, is_unvisited):
	for v in graph.vertices():
		if is_unvisited(v):
			yield v
