
import doctest
import unittest

import networkx as nx

import graphwalk.graph.basegraph
import graphwalk.graph.nxconvert
from graphwalk.graph import DirectedGraph, UndirectedGraph, edge_weights, from_networkx, to_networkx

def load_tests(loader, tests, ignore):
	tests.addTests(doctest.DocTestSuite(graphwalk.graph.basegraph))
	tests.addTests(doctest.DocTestSuite(graphwalk.graph.nxconvert))
	return tests

class UndirectedTester(unittest.TestCase):
	def setUp(self):
		self.g = UndirectedGraph()

	# adds vertices from iterable to a graph and connects them in a circle
	def add_circle_component(self, iterable):
		lst = list(iterable)
		self.g.add_vertices(lst)
		for i in range(-1, len(lst)-1): # -1 to include last<->first edge
			self.g.add_edge(lst[i], lst[i+1])

	def test_double_vertex_onecall(self):
		with self.assertRaises(ValueError):
			self.g.add_vertices(['a', 'b', 'c', 'b']) # duplicate vertex 'b'
		self.assertEqual(self.g.num_vertices(), 0)

	def test_double_vertex_twocall(self):
		self.g.add_vertices(['a', 'b'])
		with self.assertRaises(ValueError):
			self.g.add_vertices(['c', 'b', 'e']) # duplicate vertex 'b'

	def test_none_vertex(self):
		with self.assertRaises(ValueError):
			self.g.add_vertex(None)
		with self.assertRaises(ValueError):
			self.g.add_edge('a', None)

	# Multigraph functionality
	def test_double_edge(self):
		self.g.add_vertices(['a', 'b'])
		e1 = self.g.add_edge('a','b')
		e2 = self.g.add_edge('a','b')

		self.assertNotEqual(e1, e2)
		self.assertListEqual(list(self.g.edges()), [e1, e2])
		self.assertListEqual(self.g.all_edges('b', 'a'), [e1, e2])

	# Undirectedness
	def test_back_edge(self):
		self.g.add_vertices(['a', 'b'])
		e = self.g.add_edge('a', 'b')

		a_edges = set(self.g.out_edges('a'))
		b_edges = set(self.g.out_edges('b'))
		self.assertSetEqual(a_edges, b_edges)
		self.assertEqual(self.g.edge_target_given_source(e, 'b'), 'a')
		self.assertEqual(self.g.edge_source_given_target(e, 'b'), 'a')

	def test_wrong_endpoint(self):
		e = self.g.add_edge('a', 'b')
		self.g.add_vertex('c')
		with self.assertRaises(ValueError):
			self.g.edge_target_given_source(e, 'c')

	def test_has_vertex(self):
		vs = [c for c in 'abcde']
		self.g.add_vertices(c for c in 'abde')

		actual   = {v:self.g.has_vertex(v) for v in vs}
		expected = {'a': True, 'b': True, 'c': False, 'd': True, 'e': True}
		self.assertDictEqual(actual, expected)

	def test_circle(self):
		self.add_circle_component(c for c in 'abcdefg')
		self.assertEqual(self.g.num_edges(), 7)
		self.assertEqual(len(list(self.g.incident_edges('a'))), 2)

	def test_integer_vertices(self):
		self.g.add_vertices(range(10))
		self.g.add_edge(9,3)
		self.g.add_edge(9,2)

		es = list(self.g.out_edges(3))
		self.assertEqual(len(es),1)
		self.assertEqual(self.g.edge_target_given_source(es[0], 3), 9)

class DirectedTester(unittest.TestCase):
	def setUp(self):
		self.g = DirectedGraph()

	def test_in_and_out(self):
		ab, bc = self.g.add_path('abc')
		self.assertListEqual(list(self.g.out_edges('b')), [bc])
		self.assertListEqual(list(self.g.in_edges('b')), [ab])
		self.assertListEqual(list(self.g.incident_edges('b')), [bc, ab])

	def test_edge_ids(self):
		ab, bc = self.g.add_path('abc')
		self.assertTrue(self.g.has_edge_id(ab))
		self.assertTrue(self.g.has_edge_id(bc))
		self.assertFalse(self.g.has_edge_id(bc + 1))
		self.assertFalse(self.g.has_edge_id('ab'))

	def test_direction_is_checked(self):
		e = self.g.add_edge('a', 'b')
		with self.assertRaises(ValueError):
			self.g.edge_target_given_source(e, 'b')
		with self.assertRaises(ValueError):
			self.g.edge_source_given_target(e, 'a')

	def test_self_loop_incident_once(self):
		e = self.g.add_edge('a', 'a')
		self.assertListEqual(list(self.g.incident_edges('a')), [e])

	def test_arbitrary_edge(self):
		e = self.g.add_edge('a', 'b')
		self.assertEqual(self.g.arbitrary_edge('a', 'b'), e)
		with self.assertRaises(ValueError):
			self.g.arbitrary_edge('b', 'a')

	def test_edge_weights(self):
		e1 = self.g.add_edge('a', 'b', weight=2)
		e2 = self.g.add_edge('b', 'c')
		weight = edge_weights(self.g)
		self.assertEqual(weight(e1), 2.0)
		with self.assertRaises(KeyError):
			weight(e2)
		self.assertEqual(edge_weights(self.g, default=7)(e2), 7.0)
		self.assertEqual(edge_weights(self.g, attr='cost', default=1)(e1), 1.0)

class NetworkxTester(unittest.TestCase):
	def test_from_digraph(self):
		nxg = nx.DiGraph()
		nxg.add_nodes_from('zyx')
		nxg.add_edge('z', 'x', weight=1.5)
		g = from_networkx(nxg)

		self.assertTrue(g.is_directed())
		self.assertListEqual(list(g.vertices()), ['z', 'y', 'x'])
		e, = g.out_edges('z')
		self.assertEqual(g.edge_attribute(e, 'weight'), 1.5)

	def test_from_multigraph(self):
		nxg = nx.MultiGraph()
		nxg.add_edge(0, 1, weight=1.0)
		nxg.add_edge(0, 1, weight=2.0)
		g = from_networkx(nxg)

		self.assertFalse(g.is_directed())
		self.assertEqual(g.num_edges(), 2)
		weights = sorted(g.edge_attribute(e, 'weight') for e in g.edges())
		self.assertListEqual(weights, [1.0, 2.0])

	def test_to_networkx(self):
		g = DirectedGraph()
		g.add_path('abc', weight=4.0)
		nxg = to_networkx(g)

		self.assertIsInstance(nxg, nx.MultiDiGraph)
		self.assertEqual(nxg.number_of_edges(), 2)
		self.assertEqual(nxg['a']['b'][0]['weight'], 4.0)
