"""Filesystem utility helpers."""

from __future__ import annotations

import os
import tempfile


class WriteError(RuntimeError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Could not write {path}: {cause}")
        self.path = path
        self.cause = cause


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def write_text(path: str, content: str, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content`` via a temp file in the same directory.

    Readers either see the previous file or the complete new one; on failure
    the temp file is removed and the previous file is left untouched.
    """
    dir_part = os.path.dirname(path) or "."
    tmp_path = None
    try:
        ensure_dir(dir_part)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=dir_part
        )
        with os.fdopen(fd, "w", encoding=encoding) as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise WriteError(path, e) from e


def read_text(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as fh:
        return fh.read()
