"""
Line sources for the airspace parser.

A line source hands out one line at a time and reports how far it got,
so the parser can report progress while reading large files.
"""

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class LineReader(ABC):
    """Base interface for sequential line sources."""

    @abstractmethod
    def read(self) -> Optional[str]:
        """
        Read the next line.

        Returns:
            The line without its line terminator, or None at end of input
        """
        pass

    @abstractmethod
    def tell(self) -> int:
        """Return the number of bytes consumed so far."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the total size of the input in bytes."""
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> 'LineReader':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class TextFileLineReader(LineReader):
    """
    Read lines from a text file on disk.

    The file is read in binary mode so that byte offsets are exact, and
    each line is decoded individually.
    """

    def __init__(self, path: Union[str, Path], encoding: str = 'utf-8', errors: str = 'replace'):
        """
        Open the file.

        Args:
            path: Path to the airspace file
            encoding: Text encoding of the file
            errors: Decoding error handler passed to bytes.decode
        """
        self.path = Path(path)
        self.encoding = encoding
        self.errors = errors
        self._size = self.path.stat().st_size
        self._handle = open(self.path, 'rb')
        logger.debug(f"Opened {self.path} ({self._size} bytes, {encoding})")

    def read(self) -> Optional[str]:
        raw = self._handle.readline()
        if not raw:
            return None
        return raw.decode(self.encoding, self.errors).rstrip('\r\n')

    def tell(self) -> int:
        return self._handle.tell()

    def size(self) -> int:
        return self._size

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


class StringLineReader(LineReader):
    """Read lines from text already held in memory."""

    def __init__(self, text: str, encoding: str = 'utf-8'):
        self._data = text.encode(encoding)
        self._stream = io.BytesIO(self._data)
        self.encoding = encoding

    def read(self) -> Optional[str]:
        raw = self._stream.readline()
        if not raw:
            return None
        return raw.decode(self.encoding).rstrip('\r\n')

    def tell(self) -> int:
        return self._stream.tell()

    def size(self) -> int:
        return len(self._data)
