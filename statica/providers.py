"""
Content Providers resolve a logical request path to a readable file.

A provider answers ``None`` (never raises) when nothing matches, including
for a directory that has no index file.
"""

import logging
import os
import stat
import typing as t
from pathlib import Path

import aiofiles
import aiofiles.os
from rfc3986 import normalizers

from .statics import DEFAULT_CHUNK_SIZE, DEFAULT_INDEX

logger = logging.getLogger(__name__)


class StaticFile:
    """A file found by a provider, streamed with aiofiles."""

    __slots__ = ["path", "size"]

    def __init__(self, path, size):
        self.path = Path(path)
        self.size = size

    def __repr__(self):
        return f"<StaticFile {str(self.path)!r} ({self.size} bytes)>"

    @property
    def name(self):
        return self.path.name

    async def read(self) -> bytes:
        async with aiofiles.open(self.path, mode="rb") as f:
            return await f.read()

    async def stream(self, chunk_size=DEFAULT_CHUNK_SIZE):
        async with aiofiles.open(self.path, mode="rb") as f:
            while True:
                chunk = await f.read(chunk_size)
                if not chunk:
                    break
                yield chunk


class FileSystemProvider:
    """Serves files below a root directory.

    :param root: The directory files are served from.
    :param index: The file name a directory path resolves to.
    """

    def __init__(self, root=".", index=DEFAULT_INDEX):
        self.root = Path(os.path.abspath(root))
        self.index = index

    def __repr__(self):
        return f"<FileSystemProvider root={str(self.root)!r}>"

    def local_path(self, logical_path) -> t.Optional[Path]:
        """Maps a logical path onto the filesystem, or ``None`` if it escapes the root."""
        path = normalizers.remove_dot_segments("/" + logical_path.lstrip("/"))
        candidate = Path(os.path.normpath(os.path.join(self.root, path.lstrip("/"))))
        if candidate != self.root and self.root not in candidate.parents:
            return None
        return candidate

    async def _stat(self, path):
        try:
            return await aiofiles.os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return None

    async def resolve(self, logical_path) -> t.Optional[StaticFile]:
        path = self.local_path(logical_path)
        if path is None:
            logger.debug(f"Refusing path outside of root: {logical_path}")
            return None

        st = await self._stat(path)
        if st is not None and stat.S_ISDIR(st.st_mode):
            path = path / self.index
            st = await self._stat(path)

        if st is None or not stat.S_ISREG(st.st_mode):
            logger.debug(f"Not found: {logical_path}")
            return None

        return StaticFile(path, st.st_size)
