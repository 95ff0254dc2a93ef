
from .basegraph import *
from .nxconvert import *
