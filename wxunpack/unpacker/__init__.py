from .decoder import (
    DecodeResult,
    SubpackageRequest,
    SkipArchive,
    DecoderNotConfigured,
    DecoderLoadError,
    load_decoder
)
from .discovery import PackageDiscovery
from .pipeline import UnpackPipeline, unpack
from .realigner import SubpackageRealigner
from .merger import MainPackageMerger
from .finalizer import PluginInjector, ConfigWriter
from .unpacker import Unpacker, UnpackContext, unpack_wxapkg

__all__ = [
    "DecodeResult",
    "SubpackageRequest",
    "SkipArchive",
    "DecoderNotConfigured",
    "DecoderLoadError",
    "load_decoder",
    "PackageDiscovery",
    "UnpackPipeline",
    "unpack",
    "SubpackageRealigner",
    "MainPackageMerger",
    "PluginInjector",
    "ConfigWriter",
    "Unpacker",
    "UnpackContext",
    "unpack_wxapkg"
]
