
import doctest
import itertools
import logging
import threading
import unittest

import graphwalk.util.misc
from graphwalk.util import window2, unlimited_range
from graphwalk.util.log import getLogger, set_job_suffix, get_job_suffix, configure_logging

def load_tests(loader, tests, ignore):
	tests.addTests(doctest.DocTestSuite(graphwalk.util.misc))
	return tests

class MiscTests(unittest.TestCase):
	def test_window2_generator_input(self):
		pairs = list(window2(x*x for x in range(4)))
		self.assertListEqual(pairs, [(0,1), (1,4), (4,9)])

	def test_unlimited_range_is_independent(self):
		a = unlimited_range()
		b = unlimited_range()
		next(a); next(a)
		self.assertEqual(next(b), 0)
		self.assertEqual(next(a), 2)

class LogTests(unittest.TestCase):
	def tearDown(self):
		set_job_suffix(None)

	def test_suffix(self):
		self.assertEqual(getLogger('graphwalk.foo').name, 'graphwalk.foo')
		set_job_suffix(3)
		self.assertEqual(get_job_suffix(), '3')
		self.assertEqual(getLogger('graphwalk.foo').name, 'graphwalk.foo.3')
		set_job_suffix(None)
		self.assertEqual(getLogger('graphwalk.foo').name, 'graphwalk.foo')

	def test_default_name(self):
		self.assertEqual(getLogger().name, 'graphwalk')

	# each thread has a suffix of its own
	def test_suffix_is_thread_local(self):
		set_job_suffix('main')
		seen = []
		def body():
			seen.append(get_job_suffix())
			set_job_suffix('worker')
			seen.append(getLogger('graphwalk').name)

		t = threading.Thread(target=body)
		t.start()
		t.join()

		self.assertListEqual(seen, [None, 'graphwalk.worker'])
		self.assertEqual(get_job_suffix(), 'main')

	def test_configure_logging_level(self):
		logger = logging.getLogger('graphwalk')
		old_level = logger.level
		old_handlers = list(logger.handlers)
		try:
			configure_logging(level='debug')
			self.assertEqual(logger.level, logging.DEBUG)
			configure_logging(level=logging.ERROR)
			self.assertEqual(logger.level, logging.ERROR)
			with self.assertRaises(ValueError):
				configure_logging(level='chatty')
		finally:
			logger.setLevel(old_level)
			logger.handlers[:] = old_handlers
