"""
wxunpack - unpack WeChat mini program .wxapkg archives into one project tree.
"""
from .unpacker import unpack, unpack_wxapkg, Unpacker, DecodeResult, SubpackageRequest

__version__ = "1.0.0"

__all__ = ["unpack", "unpack_wxapkg", "Unpacker", "DecodeResult", "SubpackageRequest"]
