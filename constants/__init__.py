"""
Constants Package

Static unit tables and input validation limits.
"""

from .units import *  # noqa: F401,F403
from .validation import *  # noqa: F401,F403
