"""
Utility functions for file handling.
"""

from pathlib import Path
from typing import List

from kurdish_sorter.readers.base import ReaderRegistry

SORTED_SUFFIX = "-sorted"


def get_processable_files(directory: Path) -> List[Path]:
    """
    Files in directory that some reader supports, sorted by name.

    Files already produced by the sorter (<stem>-sorted.<ext>) are skipped.
    """
    files = []
    for file in sorted(Path(directory).iterdir()):
        if not file.is_file() or file.stem.endswith(SORTED_SUFFIX):
            continue
        if ReaderRegistry.get_reader_for_file(file) is not None:
            files.append(file)
    return files


def get_file_stem(file_path: Path) -> str:
    """
    Get the stem of a filename.
    For files with extension: returns stem
    For files without extension: returns full name
    """
    if file_path.suffix:
        return file_path.stem
    return file_path.name


def sorted_output_path(input_path: Path, out_dir: Path) -> Path:
    """Output path for a sorted copy: <out_dir>/<stem>-sorted<ext>."""
    input_path = Path(input_path)
    return Path(out_dir) / f"{get_file_stem(input_path)}{SORTED_SUFFIX}{input_path.suffix}"
