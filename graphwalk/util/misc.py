import itertools

__all__ = [
	'window2',
	'unlimited_range',
]

def window2(it):
	'''
	Get (overlapping) adjacent pairs from an iterable.

	>>> x = [1,2,3,10,7]
	>>> derivative = [b-a for (a,b) in window2(x)]
	>>> derivative
	[1, 1, 7, -3]
	>>> list(window2([1])) # no "pairs"
	[]
	>>> list(window2([]))  # likewise
	[]
	'''
	it = iter(it) # allow next() to consume elements

	try: prev = next(it)
	except StopIteration:  # 0-length list
		return

	for x in it:
		yield (prev,x)
		prev = x

def unlimited_range(start=0, step=1):
	'''
	Counts upwards forever.  Used to hand out timestamps.

	>>> list(itertools.islice(unlimited_range(), 4))
	[0, 1, 2, 3]
	>>> list(itertools.islice(unlimited_range(10, 5), 3))
	[10, 15, 20]
	'''
	i = start
	while True:
		yield i
		i += step

if __name__ == '__main__':
	import doctest
	doctest.testmod()
