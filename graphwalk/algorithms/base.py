
import enum
import threading
from abc import ABCMeta, abstractmethod

from graphwalk.algorithms.events import EventBus
from graphwalk.util.log import getLogger

__all__ = [
	'ComputationState',
	'CancelManager',
	'AlgorithmBase',
	'RootedAlgorithmBase',
]

class ComputationState(enum.Enum):
	NOT_RUNNING = 'not running'
	RUNNING     = 'running'
	FINISHED    = 'finished'
	ABORTED     = 'aborted'

class CancelManager:
	'''
	Cooperative cancellation flag.

	May be set from any thread; algorithms poll it at fixed points and
	stop as soon as they see it.
	'''
	def __init__(self):
		self.__event = threading.Event()

	def cancel(self):
		self.__event.set()

	def reset(self):
		self.__event.clear()

	def is_cancelling(self):
		return self.__event.is_set()

class AlgorithmBase(metaclass=ABCMeta):
	'''
	Common scaffolding of a graph computation.

	A computation instance owns its result maps exclusively.  ``compute``
	builds fresh maps every time it is called, so maps handed out by an
	earlier call are never touched again.

	``host`` is any object with an ``is_cancelling()`` method.  Nested
	algorithms receive their owner as host, so that cancelling the owner
	also stops them.
	'''
	# names of the events fired by this algorithm; see the visitor classes
	EVENTS = ()

	def __init__(self, graph, host=None):
		if graph is None:
			raise ValueError('graph cannot be None')
		if host is not None and not callable(getattr(host, 'is_cancelling', None)):
			raise TypeError('host must provide is_cancelling(); got {!r}'.format(host))

		self._graph = graph
		self._host = host
		self._cancel_manager = CancelManager()
		self._state = ComputationState.NOT_RUNNING
		self.events = EventBus(self.EVENTS)
		self._log = getLogger(type(self).__module__)

	@property
	def graph(self):
		return self._graph

	@property
	def state(self):
		return self._state

	def is_cancelling(self):
		if self._cancel_manager.is_cancelling():
			return True
		return self._host is not None and self._host.is_cancelling()

	def abort(self):
		''' Request cancellation.  The computation stops at its next poll point. '''
		self._cancel_manager.cancel()

	def compute(self):
		if self._state is ComputationState.RUNNING:
			raise RuntimeError('{} is already running'.format(type(self).__name__))

		self._cancel_manager.reset()
		self._state = ComputationState.RUNNING
		try:
			self._initialize()
			self._internal_compute()
		except BaseException:
			self._state = ComputationState.ABORTED
			raise

		if self.is_cancelling():
			self._state = ComputationState.ABORTED
			self._log.info('%s was cancelled; results are incomplete', type(self).__name__)
		else:
			self._state = ComputationState.FINISHED

	def _initialize(self):
		pass

	@abstractmethod
	def _internal_compute(self):
		pass

	def _fire(self, name, *args):
		self.events.fire(name, *args)

class RootedAlgorithmBase(AlgorithmBase):
	'''
	An algorithm which runs from a single root, or from every component
	when no root is set.
	'''
	def __init__(self, graph, host=None):
		super().__init__(graph, host)
		self.__root = None

	def set_root_vertex(self, v):
		if v is None:
			raise ValueError('root vertex cannot be None')
		if not self._graph.has_vertex(v):
			raise ValueError('root vertex {!r} is not in the graph'.format(v))
		self.__root = v

	def clear_root_vertex(self):
		self.__root = None

	def root_vertex(self):
		''' The explicit root, or ``None``. '''
		return self.__root

	def compute(self, root=None):
		if root is not None:
			self.set_root_vertex(root)
		super().compute()
