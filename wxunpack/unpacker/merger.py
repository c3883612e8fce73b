"""
wxunpack Main Package Merger
Folds every other unpack directory into the main package.
"""
import os
from pathlib import Path
from typing import List, Optional, Set
from ..utils.logger import logger
from ..utils.fs import list_files, relative_to, rename_file, remove_tree, strip_ext


class MainPackageMerger:
    def merge(
        self,
        main_package: Optional[str],
        processed: List[str],
        seen: Set[str] = None
    ) -> List[str]:
        """
        Move the content of each processed archive's unpack directory into
        main_package, in the order the archives were decoded.

        Args:
            main_package: directory all other unpack directories merge into
            processed: archive paths as recorded after decoding
            seen: directories already merged or realigned this run; merged
                directories are added to it

        Returns:
            the unpack directories that were merged and removed
        """
        if not main_package:
            logger.warning("mainPackage not found!")
            return []

        logger.debug("Move subpackage to main package.")
        main_resolved = Path(main_package).resolve()
        seen = seen if seen is not None else set()
        merged = []

        for archive in processed:
            unpacked_dir = strip_ext(archive)
            if Path(unpacked_dir).resolve() == main_resolved:
                continue
            if unpacked_dir in seen:
                logger.warning(f"already processed: {unpacked_dir}")
                continue
            if not os.path.isdir(unpacked_dir):
                # Already merged on a previous run
                continue

            for file in list_files(unpacked_dir):
                rename_file(file, Path(main_package) / relative_to(file, unpacked_dir))

            remove_tree(unpacked_dir)
            seen.add(unpacked_dir)
            merged.append(unpacked_dir)
            logger.info(f"📁 Merged {unpacked_dir} → {main_package}")

        return merged


__all__ = ["MainPackageMerger"]
