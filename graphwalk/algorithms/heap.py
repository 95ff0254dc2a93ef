
__all__ = [
	'VertexPriorityQueue',
]

class VertexPriorityQueue:
	'''
	A binary heap of vertices supporting decrease-key.

	Priorities are not stored; they are looked up through ``key(v)`` and
	compared with ``is_better(a, b)``, so the queue follows a distance map
	owned by someone else.  After changing a queued vertex's distance, call
	``update(v)`` to restore the heap order.

	A position index makes ``update`` and membership tests O(1) to locate.

	>>> dist = {'a': 3.0, 'b': 1.0, 'c': 2.0}
	>>> q = VertexPriorityQueue(dist.__getitem__, lambda a, b: a < b)
	>>> for v in 'abc': q.push(v)
	>>> dist['a'] = 0.5
	>>> q.update('a')
	>>> [q.pop() for _ in range(len(q))]
	['a', 'b', 'c']
	'''
	def __init__(self, key, is_better):
		self._key = key
		self._is_better = is_better
		self._heap = []
		self._position = {}

	def __len__(self):
		return len(self._heap)

	def __contains__(self, v):
		return v in self._position

	def __iter__(self):
		''' Queued vertices, in heap (not priority) order. '''
		return iter(list(self._heap))

	def push(self, v):
		if v in self._position:
			raise ValueError('vertex {!r} is already queued'.format(v))
		self._heap.append(v)
		self._position[v] = len(self._heap) - 1
		self._sift_up(len(self._heap) - 1)

	def peek(self):
		if not self._heap:
			raise IndexError('peek from an empty queue')
		return self._heap[0]

	def pop(self):
		if not self._heap:
			raise IndexError('pop from an empty queue')
		top = self._heap[0]
		last = self._heap.pop()
		del self._position[top]
		if self._heap:
			self._heap[0] = last
			self._position[last] = 0
			self._sift_down(0)
		return top

	def update(self, v):
		''' Restore heap order after the key of ``v`` changed (in either direction). '''
		try: i = self._position[v]
		except KeyError:
			raise ValueError('vertex {!r} is not queued'.format(v)) from None
		i = self._sift_up(i)
		self._sift_down(i)

	def check_invariant(self):
		'''
		Check that no queued vertex is better than the top one.

		Raises ``AssertionError`` on violation.  This is a full O(n) scan, meant
		for verification mode only.
		'''
		if not self._heap:
			return
		top = self._heap[0]
		top_key = self._key(top)
		for v in self._heap[1:]:
			if self._is_better(self._key(v), top_key):
				raise AssertionError('priority queue invariant violated: {!r} ({!r}) is better'
					' than the top {!r} ({!r})'.format(v, self._key(v), top, top_key))

	def _better(self, i, j):
		return self._is_better(self._key(self._heap[i]), self._key(self._heap[j]))

	def _swap(self, i, j):
		heap = self._heap
		heap[i], heap[j] = heap[j], heap[i]
		self._position[heap[i]] = i
		self._position[heap[j]] = j

	def _sift_up(self, i):
		while i > 0:
			parent = (i - 1) // 2
			if not self._better(i, parent):
				break
			self._swap(i, parent)
			i = parent
		return i

	def _sift_down(self, i):
		n = len(self._heap)
		while True:
			best = i
			for child in (2*i + 1, 2*i + 2):
				if child < n and self._better(child, best):
					best = child
			if best == i:
				return i
			self._swap(i, best)
			i = best
