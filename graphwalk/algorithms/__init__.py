
from .events import *
from .base import *
from .roots import *
from .observers import *
from .relaxers import *
from .heap import *
from .search import *
from .shortest_path import *
from .dominators import *
