"""
wxunpack Decoder Contract
The archive decoder is pluggable: any callable taking an archive path,
writing its files into the unpack directory and returning a DecodeResult.
"""
import importlib
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union


class SkipArchive(Exception):
    """Raised by a before_process hook to veto decoding one archive"""


class DecoderNotConfigured(ValueError):
    pass


class DecoderLoadError(ValueError):
    pass


@dataclass(frozen=True)
class SubpackageRequest:
    split_entry_script: str     # e.g. 'subpkg/game.js', relative to split_entry_dir
    split_entry_dir: str        # directory the split package was decoded into
    target_package_dir: str     # where its content belongs

    @classmethod
    def from_dict(cls, data: Dict) -> 'SubpackageRequest':
        return cls(
            split_entry_script=data['split_entry_script'],
            split_entry_dir=data['split_entry_dir'],
            target_package_dir=data['target_package_dir']
        )


@dataclass(frozen=True)
class DecodeResult:
    main_package: Optional[str] = None
    subpackage_request: Optional[SubpackageRequest] = None
    plugin_detected: bool = False

    @classmethod
    def coerce(cls, value: Union['DecodeResult', Dict, None]) -> 'DecodeResult':
        """Accept what a decoder returned: a DecodeResult, a plain dict or nothing"""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            request = value.get('subpackage_request')
            if isinstance(request, dict):
                request = SubpackageRequest.from_dict(request)
            return cls(
                main_package=value.get('main_package'),
                subpackage_request=request,
                plugin_detected=bool(value.get('plugin_detected', False))
            )
        raise TypeError(f"Decoder returned unsupported value: {value!r}")


Decoder = Callable[[str], Union[DecodeResult, Dict, None]]


def load_decoder(ref: Union[str, Decoder, None]) -> Decoder:
    """
    Resolve a decoder from a callable or a 'package.module:callable' reference.
    """
    if ref is None or ref == '':
        raise DecoderNotConfigured(
            "No archive decoder configured — set unpack.decoder in "
            "wxunpack.config.json or pass --decoder module:callable"
        )
    if callable(ref):
        return ref

    module_name, sep, attr = str(ref).partition(':')
    if not sep or not module_name or not attr:
        raise DecoderLoadError(f"Invalid decoder reference '{ref}' — expected module:callable")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DecoderLoadError(f"Cannot import decoder module '{module_name}': {e}") from e

    decoder = module
    for part in attr.split('.'):
        decoder = getattr(decoder, part, None)
        if decoder is None:
            raise DecoderLoadError(f"Decoder '{attr}' not found in module '{module_name}'")

    if not callable(decoder):
        raise DecoderLoadError(f"Decoder '{ref}' is not callable")
    return decoder


__all__ = [
    "SkipArchive",
    "DecoderNotConfigured",
    "DecoderLoadError",
    "SubpackageRequest",
    "DecodeResult",
    "Decoder",
    "load_decoder"
]
