# SPDX-License-Identifier: MIT
"""Packing of snippet files into an .alfredsnippets archive."""

from os import PathLike
from pathlib import Path
from typing import Iterable, Union
import zipfile


class ArchiveError(Exception):
    """Raised when the archive could not be created."""


def zip_files(target: Union[str, PathLike], files: Iterable[Union[str, PathLike]]):
    """
    Create a zip archive at target containing the given files.

    Files are stored under their base name, without any directories. If any
    file cannot be added, the incomplete archive is removed.

    :raises ArchiveError: if the archive could not be written.
    """
    target = Path(target)

    try:
        with zipfile.ZipFile(target, "w", zipfile.ZIP_DEFLATED) as zf:
            for file_path in files:
                file_path = Path(file_path)
                zf.write(file_path, arcname=file_path.name)
    except (OSError, ValueError) as e:
        if target.is_file():
            target.unlink()
        raise ArchiveError(f"Could not create {target}: {e}") from e
