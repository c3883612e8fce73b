"""
wxunpack CLI Commands
"""

from . import unpack

__all__ = ["unpack"]
