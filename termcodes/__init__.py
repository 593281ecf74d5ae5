"""Encoders for ANSI/VT100 terminal escape sequences."""

from .__about__ import __version__
from .core import *
from .sgr import *
from .color import *
