"""Object storage used to fetch tester signature images."""

from __future__ import annotations

import logging
import pathlib
from typing import Protocol

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    def download(self, bucket: str, key: str) -> bytes:
        ...


class FileSystemObjectStore:
    """Read objects from ``<root>/<bucket>/<branch>/<key>`` on local disk.

    Objects are namespaced by deployment branch the same way they are in
    the hosted buckets.
    """

    def __init__(self, root: str | pathlib.Path, branch: str) -> None:
        self.root = pathlib.Path(root)
        self.branch = branch

    def path_for(self, bucket: str, key: str) -> pathlib.Path:
        return self.root / bucket / self.branch / key

    def download(self, bucket: str, key: str) -> bytes:
        path = self.path_for(bucket, key)
        logger.debug("Reading object %s", path)
        return path.read_bytes()


__all__ = ["ObjectStore", "FileSystemObjectStore"]
