
import enum

__all__ = [
	'Color',
	'EventBus',
]

class Color(enum.Enum):
	''' Per-vertex traversal state.  Moves WHITE -> GRAY -> BLACK, never back. '''
	WHITE = 'unvisited'
	GRAY  = 'in progress'
	BLACK = 'finished'

class EventBus:
	'''
	Named events, each with an ordered list of handlers.

	The set of event names is fixed at construction; subscribing to a name
	that isn't on the list is an error (most likely a typo).

	>>> bus = EventBus(['tree_edge'])
	>>> seen = []
	>>> bus.subscribe('tree_edge', seen.append)
	>>> bus.fire('tree_edge', 3)
	>>> seen
	[3]
	>>> bus.subscribe('tree_egde', seen.append)
	Traceback (most recent call last):
	  ...
	KeyError: "no such event 'tree_egde'"
	'''
	def __init__(self, names):
		self._handlers = {name:[] for name in names}

	def names(self):
		return list(self._handlers)

	def _handler_list(self, name):
		try: return self._handlers[name]
		except KeyError:
			raise KeyError('no such event {!r}'.format(name)) from None

	def subscribe(self, name, handler):
		if not callable(handler):
			raise TypeError('handler for {!r} is not callable: {!r}'.format(name, handler))
		self._handler_list(name).append(handler)

	def unsubscribe(self, name, handler):
		''' Remove one registration of ``handler`` (the latest one).

		Scopes nest, so the most recent registration is the one being undone;
		the order of the remaining handlers is unchanged. '''
		handlers = self._handler_list(name)
		for i in reversed(range(len(handlers))):
			if handlers[i] == handler:
				del handlers[i]
				return
		raise ValueError('handler {!r} is not subscribed to {!r}'.format(handler, name))

	def has_subscribers(self, name):
		return len(self._handler_list(name)) > 0

	def fire(self, name, *args):
		handlers = self._handlers[name]
		if not handlers:
			return
		# snapshot, so that a handler may unsubscribe itself
		for handler in tuple(handlers):
			handler(*args)
