from importlib.metadata import version, PackageNotFoundError
from vecmat.defs import *
from vecmat.errors import *
from vecmat.vector import *
from vecmat.vector2d import *
from vecmat.matrix import *
from vecmat.pipeline import *


try:
    __version__ = version("vecmat")
except PackageNotFoundError:
    __version__ = "unknown version"
