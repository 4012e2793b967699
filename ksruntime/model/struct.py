"""Base class for generated per-format readers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from ksruntime.io.stream import Stream


class Struct:
    """Common state shared by every generated reader.

    Subclasses parse their fields from ``_io`` in their own constructor and
    list the public field names in ``FIELDS``; those names are what
    ``fields()`` and ``repr()`` show. Navigation attributes (``_io``,
    ``_parent``, ``_root``) are never included.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ()

    def __init__(self, _io: Stream, _parent: Struct | None = None, _root: Struct | None = None) -> None:
        self._io = _io
        self._parent = _parent
        self._root = _root if _root is not None else self

    @classmethod
    def from_file(cls, path: str | Path) -> Struct:
        """Parse a named file. The file is closed again if parsing fails."""
        stream = Stream.open(path)
        try:
            return cls(stream)
        except BaseException:
            stream.close()
            raise

    @classmethod
    def from_bytes(cls, data: bytes) -> Struct:
        """Parse an in-memory buffer."""
        return cls(Stream(data))

    def fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def close(self) -> None:
        self._io.close()

    def __enter__(self) -> Struct:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        parts = ' '.join(f'{name}={value!r}' for name, value in self.fields().items())
        return f'{type(self).__name__}({parts})'
