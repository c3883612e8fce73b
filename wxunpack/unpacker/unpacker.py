"""
wxunpack Unpacker
Unpacks every archive of a mini program, stitches split subpackages back in
place and merges the result into the main package directory.
"""
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set
from ..utils.logger import logger
from ..utils.fs import clean_already_unpacked
from ..config import config
from .decoder import Decoder, DecodeResult, SubpackageRequest, load_decoder
from .discovery import PackageDiscovery
from .pipeline import UnpackPipeline
from .realigner import SubpackageRealigner
from .merger import MainPackageMerger
from .finalizer import PluginInjector, ConfigWriter


@dataclass
class UnpackContext:
    """State gathered from the decode results of one unpack run"""
    main_package: Optional[str] = None
    plugin_detected: bool = False
    subpackage_request: Optional[SubpackageRequest] = None
    processed: List[str] = field(default_factory=list)
    seen: Set[str] = field(default_factory=set)

    def absorb(self, result: DecodeResult):
        if result.main_package and not self.main_package:
            self.main_package = result.main_package
        self.plugin_detected = self.plugin_detected or result.plugin_detected
        self.subpackage_request = result.subpackage_request


class Unpacker:
    def __init__(
        self,
        decoder: Decoder = None,
        discovery: PackageDiscovery = None,
        plugin_injector: PluginInjector = None,
        config_writer: ConfigWriter = None
    ):
        self.decoder = load_decoder(decoder if decoder is not None else config.decoder)
        self.discovery = discovery or PackageDiscovery()
        self.merger = MainPackageMerger()
        self.plugin_injector = plugin_injector or PluginInjector()
        self.config_writer = config_writer or ConfigWriter()

    def unpack_wxapkg(
        self,
        path: str,
        clean_old: bool = None,
        callback: Optional[Callable[[Optional[bool]], None]] = None,
        filterable_framework: bool = None
    ) -> dict:
        """
        Unpack a single archive or every archive in a directory.

        Args:
            path: packed file or directory of packed files
            clean_old: remove previous unpack output before decoding
            callback: called with the pipeline's completion value once all
                files are written (True, or None if nothing was unpacked)
            filterable_framework: skip the bundled runtime framework archives

        Returns:
            summary dict of the run
        """
        start_time = time.time()
        if clean_old is None:
            clean_old = config.clean_old

        ctx = UnpackContext()
        realigner = SubpackageRealigner(ctx.seen)
        summary = {
            'realigned': [],
            'merged': [],
            'plugin_injected': False,
            'config_path': None
        }

        def before_process(name: str) -> None:
            logger.debug(f"{'='*31}before-process{'='*33}")
            if not clean_old:
                return
            old_package = clean_already_unpacked(name)
            if old_package:
                logger.debug(f"Already cleaned old package {old_package}")

        def on_result(name: str, result: DecodeResult):
            ctx.absorb(result)

        def processed(name: str):
            try:
                logger.debug(f"Unpacked success: {name}")
                ctx.processed.append(name)

                if ctx.subpackage_request:
                    request = ctx.subpackage_request
                    ctx.subpackage_request = None
                    if realigner.realign(request):
                        summary['realigned'].append(request.target_package_dir)
                    return

                if ctx.main_package and ctx.main_package not in ctx.seen:
                    ctx.seen.add(ctx.main_package)
            finally:
                logger.debug(f"{'='*33}processed{'='*35}\n")

        def completed():
            if ctx.main_package:
                summary['merged'] = self.merger.merge(ctx.main_package, ctx.processed, ctx.seen)
                if ctx.plugin_detected:
                    summary['plugin_injected'] = self.plugin_injector.inject(ctx.main_package)
                summary['config_path'] = self.config_writer.write(ctx.main_package)

        success = UnpackPipeline(self.decoder, self.discovery).run(
            path,
            filterable_framework=filterable_framework,
            before_process=before_process,
            processed=processed,
            completed=completed,
            on_result=on_result
        )
        # Merge and finalize ran inside completed, so all output is on disk here
        if callback:
            callback(success)

        elapsed = time.time() - start_time
        if success:
            logger.info(f"✅ Unpacked {len(ctx.processed)} package(s) in {elapsed:.2f}s")

        return {
            'success': bool(success),
            'main_package': ctx.main_package,
            'processed': list(ctx.processed),
            'realigned': summary['realigned'],
            'merged': summary['merged'],
            'plugin_injected': summary['plugin_injected'],
            'config_path': summary['config_path'],
            'time': elapsed
        }


def unpack_wxapkg(
    path: str,
    clean_old: bool = True,
    callback: Optional[Callable[[Optional[bool]], None]] = None,
    decoder: Decoder = None,
    filterable_framework: bool = None
) -> dict:
    """Convenience wrapper around Unpacker(decoder).unpack_wxapkg()"""
    return Unpacker(decoder=decoder).unpack_wxapkg(
        path,
        clean_old=clean_old,
        callback=callback,
        filterable_framework=filterable_framework
    )


__all__ = ["Unpacker", "UnpackContext", "unpack_wxapkg"]
