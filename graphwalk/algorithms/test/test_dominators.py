
import doctest
import unittest

import networkx as nx

import graphwalk.algorithms.dominators
from graphwalk.graph import DirectedGraph, UndirectedGraph, from_networkx
from graphwalk.algorithms import *

def load_tests(loader, tests, ignore):
	tests.addTests(doctest.DocTestSuite(graphwalk.algorithms.dominators))
	return tests

def graph_from_pairs(pairs):
	g = DirectedGraph()
	for (s, t) in pairs:
		g.add_edge(s, t)
	return g

# The example flow graph of Lengauer and Tarjan's paper
PAPER_EDGES = [
	('R','A'), ('R','B'), ('R','C'), ('A','D'), ('B','A'), ('B','D'), ('B','E'),
	('C','F'), ('C','G'), ('D','L'), ('E','H'), ('F','I'), ('G','I'), ('G','J'),
	('H','E'), ('H','K'), ('I','K'), ('J','I'), ('K','I'), ('K','R'), ('L','H'),
]
PAPER_IDOMS = {
	'A': 'R', 'B': 'R', 'C': 'R', 'D': 'R', 'E': 'R', 'F': 'C', 'G': 'C',
	'H': 'R', 'I': 'R', 'J': 'G', 'K': 'R', 'L': 'D',
}

class DominatorTests(unittest.TestCase):
	def setUp(self):
		self.g = graph_from_pairs([('r','a'), ('r','b'), ('a','c'), ('b','c'), ('c','d'), ('d','a')])

	def test_small(self):
		alg = compute_dominators(self.g, 'r')

		self.assertDictEqual(alg.time_stamps, {'r': 0, 'a': 1, 'c': 2, 'd': 3, 'b': 4})
		self.assertDictEqual(alg.semidominators, {'b': 'r', 'd': 'c', 'c': 'r', 'a': 'r'})
		self.assertDictEqual(alg.immediate_dominators, {'a': 'r', 'c': 'r', 'd': 'c', 'b': 'r'})
		# keyed in discovery order
		self.assertListEqual(list(alg.immediate_dominators), ['a', 'c', 'd', 'b'])
		self.assertDictEqual(alg.dominator_tree(), {'r': ['a', 'c', 'b'], 'c': ['d']})

	def test_dominates(self):
		self.g.add_edge('z', 'a')
		alg = compute_dominators(self.g, 'r')
		self.assertTrue(alg.dominates('r', 'd'))
		self.assertTrue(alg.dominates('c', 'd'))
		self.assertTrue(alg.dominates('d', 'd'))
		self.assertFalse(alg.dominates('a', 'd'))
		self.assertFalse(alg.dominates('d', 'c'))
		self.assertFalse(alg.dominates('r', 'z'))

	def test_paper_example(self):
		g = graph_from_pairs(PAPER_EDGES)
		alg = compute_dominators(g, 'R')
		self.assertDictEqual(alg.immediate_dominators, PAPER_IDOMS)

	def test_unreachable_excluded(self):
		g = graph_from_pairs([('a','b'), ('b','c'), ('z','b'), ('z','y')])
		alg = compute_dominators(g, 'a')
		self.assertSetEqual(set(alg.time_stamps), {'a', 'b', 'c'})
		self.assertDictEqual(alg.semidominators, {'c': 'b', 'b': 'a'})
		self.assertDictEqual(alg.immediate_dominators, {'b': 'a', 'c': 'b'})

	def test_root_only(self):
		g = DirectedGraph()
		g.add_vertices('ab')
		alg = compute_dominators(g, 'a')
		self.assertDictEqual(alg.time_stamps, {'a': 0})
		self.assertDictEqual(alg.semidominators, {})
		self.assertDictEqual(alg.immediate_dominators, {})

	def test_self_loop(self):
		g = graph_from_pairs([('a','b'), ('b','b'), ('b','c'), ('a','c')])
		alg = compute_dominators(g, 'a')
		self.assertDictEqual(alg.immediate_dominators, {'b': 'a', 'c': 'a'})

	# each tree of the dfs forest is its own flow graph
	def test_forest(self):
		g = graph_from_pairs([('a','b'), ('b','c'), ('d','e'), ('d','b')])
		alg = compute_dominators(g)
		self.assertDictEqual(alg.time_stamps, {'a': 0, 'b': 1, 'c': 2, 'd': 3, 'e': 4})
		self.assertDictEqual(alg.immediate_dominators, {'b': 'a', 'c': 'b', 'e': 'd'})

	def test_rerun(self):
		alg = LengauerTarjanDominators(self.g)
		alg.compute('r')
		first = alg.immediate_dominators
		alg.compute('r')
		self.assertDictEqual(alg.immediate_dominators, first)
		self.assertIsNot(alg.immediate_dominators, first)
		alg.compute('c')
		self.assertDictEqual(alg.immediate_dominators, {'d': 'c', 'a': 'd'})

	def test_cancelled(self):
		host = CancelManager()
		host.cancel()
		alg = compute_dominators(self.g, 'r', host=host)
		self.assertIs(alg.state, ComputationState.ABORTED)
		self.assertDictEqual(alg.immediate_dominators, {})

	def test_bad_graphs(self):
		with self.assertRaises(ValueError):
			LengauerTarjanDominators(UndirectedGraph())

		class OutOnly:
			def is_directed(self):
				return True
		with self.assertRaises(ValueError):
			LengauerTarjanDominators(OutOnly())

		with self.assertRaises(ValueError):
			compute_dominators(self.g, 'nope')

class NetworkxComparison(unittest.TestCase):
	def check(self, nxg, root):
		g = from_networkx(nxg)
		alg = compute_dominators(g, root)

		expected = {v:d for (v,d) in nx.immediate_dominators(nxg, root).items() if v != root}
		self.assertDictEqual(alg.immediate_dominators, expected)
		self.assertSetEqual(set(alg.time_stamps), nx.descendants(nxg, root) | {root})

		# semidominators are discovered strictly earlier than their vertex
		stamps = alg.time_stamps
		self.assertSetEqual(set(alg.semidominators), set(stamps) - {root})
		for (v, s) in alg.semidominators.items():
			self.assertLess(stamps[s], stamps[v])
			self.assertTrue(alg.dominates(alg.immediate_dominators[v], v))

	def test_random(self):
		for seed in range(10):
			self.check(nx.gnp_random_graph(30, 0.08, seed=seed, directed=True), 0)

	def test_dense(self):
		for seed in range(3):
			self.check(nx.gnm_random_graph(25, 200, seed=seed, directed=True), 3)

	def test_paper_example(self):
		nxg = nx.DiGraph(PAPER_EDGES)
		self.check(nxg, 'R')
