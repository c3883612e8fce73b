"""
wxunpack Subpackage Realigner
Moves a decoded split package under the subpackage directory it belongs to.
"""
from pathlib import Path
from typing import Optional, Set
from ..utils.logger import logger
from ..utils.fs import list_files, relative_to, remove_invalid_line, remove_tree
from .decoder import SubpackageRequest


class SubpackageRealigner:
    def __init__(self, seen: Set[str] = None):
        # Shared with the orchestrator so merged and realigned dirs are tracked together
        self.seen = seen if seen is not None else set()

    def realign(self, request: Optional[SubpackageRequest]) -> bool:
        """
        Relocate the split package described by request.

        Returns:
            True when files were moved, False for any of the no-op cases
        """
        if not request:
            logger.warning("subpackage request not found!")
            return False

        target = request.target_package_dir
        if target in self.seen:
            logger.warning(f"already processed: {target}")
            return False

        entry_dir = Path(request.split_entry_dir)
        if not (entry_dir / request.split_entry_script).exists():
            logger.debug(f"   Split entry missing, nothing to realign: {request.split_entry_script}")
            return False

        first_segment = request.split_entry_script.replace('\\', '/').split('/')[0]
        split_root = entry_dir / first_segment

        if split_root.is_file():
            # Entry script sits directly in the split dir
            files = [str(split_root)]
            remove_invalid_line(split_root, Path(target) / first_segment)
            split_root.unlink()
        else:
            files = list_files(split_root)
            for file in files:
                remove_invalid_line(file, Path(target) / relative_to(file, split_root))
            remove_tree(split_root)

        self.seen.add(target)
        logger.info(f"🔀 Realigned {len(files)} file(s) into {target}")
        return True


__all__ = ["SubpackageRealigner"]
