"""
wxunpack Unpack Pipeline
Decodes candidate archives one at a time, newest-discovered first, and
reports each one through lifecycle hooks.

The "processed" hook for an archive fires right before the next archive is
decoded (or before completion), never after it. Relocating a split
package inside the hook therefore finishes before the next decode starts.
"""
from typing import Callable, List, Optional, Tuple
from ..utils.logger import logger
from ..config import config
from .decoder import Decoder, DecodeResult, SkipArchive
from .discovery import PackageDiscovery

BeforeUnpackHook = Callable[[List[str]], Optional[List[str]]]
BeforeProcessHook = Callable[[str], Optional[str]]
ProcessedHook = Callable[[str], None]
CompletedHook = Callable[[], None]
ResultHandler = Callable[[str, DecodeResult], None]


class UnpackPipeline:
    def __init__(self, decoder: Decoder, discovery: PackageDiscovery = None):
        self.decoder = decoder
        self.discovery = discovery or PackageDiscovery()

    def run(
        self,
        root: str,
        filterable_framework: bool = None,
        before_unpack: Optional[BeforeUnpackHook] = None,
        before_process: Optional[BeforeProcessHook] = None,
        processed: Optional[ProcessedHook] = None,
        completed: Optional[CompletedHook] = None,
        on_result: Optional[ResultHandler] = None
    ) -> Optional[bool]:
        """
        Unpack every candidate under root.

        Args:
            on_result: receives (path, DecodeResult) for each decoded
                archive, immediately before its processed hook

        Returns:
            True once the queue is exhausted, None when nothing was found
        """
        if filterable_framework is None:
            filterable_framework = config.filterable_framework

        queue = self.discovery.discover(root, filterable_framework, before_unpack)
        if not queue:
            return self._complete(completed, None)

        pending: Optional[Tuple[str, DecodeResult]] = None

        while True:
            if not queue:
                if pending:
                    self._announce(processed, on_result, pending)
                return self._complete(completed, True)

            name = queue.pop()

            # Announce previous, stage current
            if pending:
                self._announce(processed, on_result, pending)
                pending = None

            try:
                name = self._before_process(before_process, name)
            except SkipArchive as e:
                logger.info(f"⏭  Skipped: {name} {e}".rstrip())
                continue

            logger.info(f"📦 Unpacking: {name}")
            pending = (name, DecodeResult.coerce(self.decoder(name)))

    @staticmethod
    def _before_process(hook: Optional[BeforeProcessHook], name: str) -> str:
        if not hook:
            return name
        renamed = hook(name)
        return renamed if renamed else name

    @staticmethod
    def _announce(
        hook: Optional[ProcessedHook],
        on_result: Optional[ResultHandler],
        pending: Tuple[str, DecodeResult]
    ):
        name, result = pending
        if on_result:
            on_result(name, result)
        if hook:
            hook(name)

    @staticmethod
    def _complete(hook: Optional[CompletedHook], success: Optional[bool]) -> Optional[bool]:
        if hook:
            hook()
        return success


def unpack(
    path: str,
    decoder: Decoder,
    filterable_framework: bool = True,
    before_unpack: Optional[BeforeUnpackHook] = None,
    before_process: Optional[BeforeProcessHook] = None,
    processed: Optional[ProcessedHook] = None,
    completed: Optional[CompletedHook] = None
) -> Optional[bool]:
    """
    Low-level entry point: discovery plus the hook-driven decode loop.
    Returns the completion value: True, or None when nothing was unpacked.
    """
    return UnpackPipeline(decoder).run(
        path,
        filterable_framework=filterable_framework,
        before_unpack=before_unpack,
        before_process=before_process,
        processed=processed,
        completed=completed
    )


__all__ = ["UnpackPipeline", "unpack"]
