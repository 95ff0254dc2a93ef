
import logging
import threading

# Uses thread-level state to tack on an extra level to the logging
#  heirarchy, so that output from concurrent computations (each of
#  which runs start to finish on a single thread) can be identified
#  in the log.

_local = threading.local()

ROOT_LOGGER_NAME = 'graphwalk'

def set_job_suffix(s):
	''' Tag loggers created on this thread with ``s``. ``None`` removes the tag. '''
	_local.job_suffix = None if s is None else str(s)

def get_job_suffix():
	return getattr(_local, 'job_suffix', None)

def getLogger(name=None):
	name = name or ROOT_LOGGER_NAME
	suffix = get_job_suffix()
	if suffix:
		name = name + '.' + suffix
	return logging.getLogger(name)

def configure_logging(config=None, level=None):
	'''
	Set the level of the package logger.

	``level`` takes priority over the level named in ``config`` (a
	``graphwalk.config.Config``).  A handler is only installed if the
	package logger has none and logging was never configured by the
	application.
	'''
	if level is None and config is not None:
		level = config.get_log_level()
	if level is None:
		level = logging.WARNING
	if isinstance(level, str):
		name = level
		level = logging.getLevelName(name.upper())
		if not isinstance(level, int):
			raise ValueError('unknown log level: {!r}'.format(name))

	logger = logging.getLogger(ROOT_LOGGER_NAME)
	logger.setLevel(level)
	if not logger.handlers and not logging.getLogger().handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter('%(levelname)s:%(name)s: %(message)s'))
		logger.addHandler(handler)
	return logger
