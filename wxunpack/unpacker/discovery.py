"""
wxunpack Package Discovery
Finds the .wxapkg archives to unpack under a file or directory.
"""
from pathlib import Path
from typing import Callable, List, Optional
from ..utils.logger import logger
from ..utils.fs import get_filename_ext, check_is_framework, list_files
from ..config import config


class PackageDiscovery:
    def __init__(
        self,
        archive_ext: str = None,
        framework_names: List[str] = None
    ):
        self.archive_ext = archive_ext or config.archive_ext
        self.framework_names = (
            framework_names if framework_names is not None
            else config.framework_names
        )

    def is_archive(self, path: str) -> bool:
        return get_filename_ext(path) == self.archive_ext

    def is_framework(self, path: str) -> bool:
        return check_is_framework(path, self.framework_names)

    def discover(
        self,
        root: str,
        filterable_framework: bool = True,
        before_unpack: Optional[Callable[[List[str]], Optional[List[str]]]] = None
    ) -> List[str]:
        """
        List candidate archives under root.

        Args:
            root: a single archive or a directory searched recursively
            filterable_framework: drop the bundled runtime framework archives
            before_unpack: optional hook receiving the filtered list; may
                return a replacement list, None keeps it as is

        Returns:
            candidate paths in discovery order, empty when there is nothing to do
        """
        root_path = Path(root)
        if not root_path.exists():
            logger.error(f"{root} path not found!")
            return []

        packages = list_files(root_path) if root_path.is_dir() else [str(root_path)]
        filtered = [p for p in packages if self._keep(p, filterable_framework)]

        if before_unpack:
            replaced = before_unpack(filtered)
            if replaced is not None:
                filtered = list(replaced)

        if not filtered:
            logger.warning(f"No available files found from: {root}")
        else:
            logger.debug(f"Found {len(filtered)} package(s) under {root}")
        return filtered

    def _keep(self, path: str, filterable_framework: bool) -> bool:
        if not self.is_archive(path):
            return False
        if not filterable_framework:
            return True
        return not self.is_framework(path)


__all__ = ["PackageDiscovery"]
