
from .misc import *
