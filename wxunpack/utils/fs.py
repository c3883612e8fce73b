"""
wxunpack Filesystem Helpers
Recursive listing, line-filtered copy and move primitives used by the pipeline.
"""
import os
import re
import shutil
from pathlib import Path
from typing import List, Optional, Union
from .logger import logger

PathLike = Union[str, Path]

# Source map references point into the original package layout
INVALID_LINE = re.compile(r'^\s*//[#@]\s*sourceMappingURL=')


def get_filename_ext(path: PathLike, without_dot: bool = True) -> str:
    """
    Return the extension of a file name.

    Args:
        path: file path
        without_dot: 'wxapkg' when True, '.wxapkg' when False
    """
    suffix = Path(path).suffix
    return suffix[1:] if without_dot else suffix


def strip_ext(path: PathLike) -> str:
    """Unpack directory of an archive: the path with its extension removed"""
    path = str(path)
    ext = get_filename_ext(path, without_dot=False)
    return path[:-len(ext)] if ext else path


def check_is_framework(path: PathLike, framework_names: List[str]) -> bool:
    stem = Path(path).stem.lower()
    return any(stem == name.lower() for name in framework_names)


def list_files(root: PathLike) -> List[str]:
    """All files beneath root, recursively, in a stable order"""
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(str(p) for p in root.rglob('*') if p.is_file())


def relative_to(path: PathLike, base: PathLike) -> str:
    rel = os.path.relpath(str(path), str(base))
    return rel.lstrip('/\\')


def remove_invalid_line(src: PathLike, dst: PathLike):
    """
    Copy src to dst, dropping lines that only make sense inside the
    original package. Non UTF-8 files are copied untouched.
    """
    dst = Path(dst)
    dst.parent.mkdir(parents=True, exist_ok=True)
    with open(src, 'rb') as f:
        data = f.read()

    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError:
        dst.write_bytes(data)
        return

    lines = text.splitlines(keepends=True)
    kept = [line for line in lines if not INVALID_LINE.match(line)]
    with open(dst, 'w', encoding='utf-8', newline='') as f:
        f.write(''.join(kept))


def rename_file(src: PathLike, dst: PathLike):
    """Move a file, creating parents and replacing any existing target"""
    dst = Path(dst)
    dst.parent.mkdir(parents=True, exist_ok=True)
    os.replace(src, dst)


def remove_tree(path: PathLike):
    shutil.rmtree(path)


def read_text(path: PathLike) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(path: PathLike, content: str):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


def clean_already_unpacked(archive_path: PathLike) -> Optional[str]:
    """Remove a previous unpack of this archive. Returns the removed dir"""
    unpacked = strip_ext(archive_path)
    if unpacked == str(archive_path) or not os.path.isdir(unpacked):
        return None
    shutil.rmtree(unpacked)
    logger.debug(f"   Removed stale output: {unpacked}")
    return unpacked


__all__ = [
    "get_filename_ext",
    "strip_ext",
    "check_is_framework",
    "list_files",
    "relative_to",
    "remove_invalid_line",
    "rename_file",
    "remove_tree",
    "read_text",
    "write_text",
    "clean_already_unpacked"
]
