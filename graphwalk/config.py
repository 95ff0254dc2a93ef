
import toml

__all__ = [
	'Config',
]

class Config:
	'''
	The graphwalk TOML "config file".

	Holds the knobs which are not part of any one computation's arguments:
	whether the shortest path algorithms verify their priority queue after
	every decrease-key, which relaxer is used when none is passed explicitly,
	and the log level.

	>>> config = Config.deserialize('[general]\\nverify_heap = true\\n')
	>>> config.get_verify_heap()
	True
	>>> config.get_relaxer()
	'shortest'
	'''
	DEFAULT_RELAXER = 'shortest'
	DEFAULT_LOG_LEVEL = 'WARNING'

	def __init__(self, verify_heap=False, relaxer=None, log_level=None):
		self.set_verify_heap(verify_heap)
		self.set_relaxer(self.DEFAULT_RELAXER if relaxer is None else relaxer)
		self.set_log_level(self.DEFAULT_LOG_LEVEL if log_level is None else log_level)

	def set_verify_heap(self, val):
		if not isinstance(val, bool):
			raise ValueError('verify_heap must be a bool, not {!r}'.format(val))
		self.__verify_heap = val
	def set_relaxer(self, name):
		# deferred to avoid a circular import
		from graphwalk.algorithms.relaxers import RELAXERS
		if name not in RELAXERS:
			raise ValueError('unknown relaxer {!r} (expected one of: {})'.format(name, ', '.join(sorted(RELAXERS))))
		self.__relaxer = name
	def set_log_level(self, level): self.__log_level = str(level).upper()

	def get_verify_heap(self): return self.__verify_heap
	def get_relaxer(self):     return self.__relaxer
	def get_log_level(self):   return self.__log_level

	def make_relaxer(self):
		''' Construct the relaxer named by this config. '''
		from graphwalk.algorithms.relaxers import relaxer_from_name
		return relaxer_from_name(self.__relaxer)

	@classmethod
	def from_file(cls, path):
		with open(path) as f:
			s = f.read()
		return cls.deserialize(s)

	def save(self, path):
		s = self.serialize()
		with open(path, 'w') as f:
			f.write(s)

	@classmethod
	def deserialize(cls, s):
		d = toml.loads(s)
		general = d.get('general', {})
		logging = d.get('logging', {})
		return cls(
			verify_heap = general.get('verify_heap', False),
			relaxer     = general.get('relaxer'),
			log_level   = logging.get('level'),
		)

	def serialize(self):
		d = {
			'general': {
				'verify_heap': self.__verify_heap,
				'relaxer': self.__relaxer,
			},
			'logging': {
				'level': self.__log_level,
			},
		}
		return toml.dumps(d)

	def __eq__(self, other):
		return type(self) is type(other) and self.serialize() == other.serialize()
