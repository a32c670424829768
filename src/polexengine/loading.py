"""Catalog loading infrastructure.

Provides the protocol for PO catalog loaders and a filesystem implementation
with optional path-traversal protection.

Components:
    CatalogLoader - Protocol for loading catalog text (structural typing)
    PathCatalogLoader - Disk-based loader

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from polexengine.constants import DEFAULT_ENCODING

__all__ = ["CatalogLoader", "PathCatalogLoader"]

logger = logging.getLogger(__name__)

type CatalogPath = str | os.PathLike[str]
"""Path to a .po/.pot file, as a string or path-like object."""


class CatalogLoader(Protocol):
    """Protocol for loading PO catalog text.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders (archives,
    version control blobs, HTTP).

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def load(self, path: str) -> str:
        ...         try:
        ...             return self.files[path]
        ...         except KeyError:
        ...             raise FileNotFoundError(errno.ENOENT, "No such file", path) from None
        ...     def describe_path(self, path: str) -> str:
        ...         return f"memory:{path}"
    """

    def load(self, path: CatalogPath) -> str:
        """Load catalog text.

        Args:
            path: Catalog path

        Returns:
            Catalog source as a string

        Raises:
            OSError: If the catalog cannot be read (errno identifies why)
        """

    def describe_path(self, path: CatalogPath) -> str:
        """Return human-readable path for diagnostics."""
        return os.fspath(path)


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader.

    Implements CatalogLoader for reading .po files from disk.

    Security:
        When ``root_dir`` is given, relative paths resolve against it and
        any path escaping it (``..``, absolute paths, symlinks) is rejected.

    Example:
        >>> loader = PathCatalogLoader(root_dir="priv/gettext")
        >>> text = loader.load("de/LC_MESSAGES/default.po")
        # Loads from: priv/gettext/de/LC_MESSAGES/default.po

    Attributes:
        root_dir: Optional fixed root directory
        encoding: Text encoding of catalog files (default UTF-8)
    """

    root_dir: str | None = None
    encoding: str = DEFAULT_ENCODING
    _resolved_root: Path | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        if self.root_dir is not None:
            object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def _resolve(self, path: CatalogPath) -> Path:
        """Resolve path against the root directory, rejecting escapes.

        Raises:
            ValueError: If path resolves outside root_dir
        """
        candidate = Path(path)
        if self._resolved_root is None:
            return candidate

        full_path = (self._resolved_root / candidate).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path '{os.fspath(path)}' resolves outside root directory '{self.root_dir}'"
            raise ValueError(msg) from None
        return full_path

    def describe_path(self, path: CatalogPath) -> str:
        """Return human-readable path for diagnostics.

        Args:
            path: Catalog path

        Returns:
            Path string including the root directory when one is configured
        """
        if self.root_dir is None:
            return os.fspath(path)
        return os.fspath(Path(self.root_dir) / path)

    def load(self, path: CatalogPath) -> str:
        """Load catalog text from disk.

        Args:
            path: Catalog path (relative to root_dir when configured)

        Returns:
            Catalog source

        Raises:
            ValueError: If path escapes root_dir
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read; undecodable bytes are reported
                as EILSEQ
        """
        full_path = self._resolve(path)
        logger.debug("Reading catalog %s", full_path)
        try:
            return full_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise OSError(
                errno.EILSEQ,
                f"{os.strerror(errno.EILSEQ)} ({self.encoding}: {e.reason})",
                os.fspath(full_path),
            ) from e
