
import math
from abc import ABCMeta, abstractmethod

__all__ = [
	'DistanceRelaxer',
	'ShortestDistanceRelaxer',
	'LongestDistanceRelaxer',
	'RELAXERS',
	'relaxer_from_name',
]

class DistanceRelaxer(metaclass=ABCMeta):
	'''
	Decides what "a better distance" means for the shortest path algorithms.

	Relaxers are stateless; make a new one whenever you need one.
	'''
	@property
	@abstractmethod
	def initial_distance(self):
		''' Distance of a vertex which has not been reached. '''
		pass

	@abstractmethod
	def is_better(self, a, b):
		''' Should distance ``a`` replace distance ``b``? '''
		pass

	@abstractmethod
	def combine(self, distance, weight):
		''' Distance obtained by extending a path of length ``distance`` by an edge. '''
		pass

	def __eq__(self, other):
		return type(self) is type(other)

	def __hash__(self):
		return hash(type(self))

	def __repr__(self):
		return '{}()'.format(type(self).__name__)

class ShortestDistanceRelaxer(DistanceRelaxer):
	'''
	>>> r = ShortestDistanceRelaxer()
	>>> r.is_better(r.combine(1.0, 2.0), r.initial_distance)
	True
	>>> r.is_better(3.0, 3.0)
	False
	'''
	initial_distance = math.inf

	def is_better(self, a, b):
		return a < b

	def combine(self, distance, weight):
		return distance + weight

class LongestDistanceRelaxer(DistanceRelaxer):
	'''
	The mirror image of ``ShortestDistanceRelaxer``.  Like Dijkstra's rule
	for non-negative weights, the search only finds longest distances when
	every weight is <= 0 (a "least negative" path).  Positive weights give
	wrong results even on acyclic graphs.

	>>> r = LongestDistanceRelaxer()
	>>> r.is_better(5.0, 2.0)
	True
	'''
	initial_distance = -math.inf

	def is_better(self, a, b):
		return a > b

	def combine(self, distance, weight):
		return distance + weight

RELAXERS = {
	'shortest': ShortestDistanceRelaxer,
	'longest':  LongestDistanceRelaxer,
}

def relaxer_from_name(name):
	try: cls = RELAXERS[name]
	except KeyError:
		raise ValueError('unknown relaxer {!r} (expected one of: {})'.format(name, ', '.join(sorted(RELAXERS)))) from None
	return cls()
