"""Local filesystem implementation of the FileSystem capability."""

from __future__ import annotations

import os
import stat


class LocalFileSystem:
    """
    Filesystem access through ``os``.

    Listing is sorted by name so scans are reproducible across platforms.
    Reads decode UTF-8 and replace undecodable bytes instead of failing.
    Errors surface as OSError (a broken symlink fails ``is_directory``).
    """

    def list_entries(self, directory: str) -> list[str]:
        return sorted(os.listdir(directory))

    def is_directory(self, path: str) -> bool:
        return stat.S_ISDIR(os.stat(path).st_mode)

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            return f.read()

    def delete_file(self, path: str) -> None:
        os.remove(path)
