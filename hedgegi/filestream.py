"""A small binary file stream with little-endian struct reads and writes."""

import os
import struct
from typing import Any


class FileStream:
    """Binary file with typed reads, length-prefixed strings and alignment."""

    def __init__(self, path, mode: str):
        if "b" not in mode:
            mode += "b"
        self._file = open(path, mode)

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None

    def _handle(self):
        if self._file is None:
            raise ValueError("stream is closed")
        return self._file

    def tell(self) -> int:
        return self._handle().tell()

    def seek(self, position: int, whence: int = os.SEEK_SET) -> None:
        self._handle().seek(position, whence)

    def _read_exact(self, size: int) -> bytes:
        data = self._handle().read(size)
        if len(data) < size:
            raise EOFError(f"expected {size} bytes, got {len(data)}")
        return data

    def read(self, fmt: str) -> Any:
        """Read one struct; a single field is returned bare, several as a tuple."""
        layout = struct.Struct("<" + fmt)
        values = layout.unpack(self._read_exact(layout.size))
        return values[0] if len(values) == 1 else values

    def read_array(self, fmt: str, count: int) -> list:
        layout = struct.Struct("<" + fmt)
        data = self._read_exact(layout.size * count)
        values = [v[0] if len(v) == 1 else v for v in layout.iter_unpack(data)]
        return values

    def read_string(self) -> str:
        length = self.read("I")
        value = self._read_exact(length).decode("utf-8")
        self.align()
        return value

    def write(self, fmt: str, *args) -> None:
        self._handle().write(struct.pack("<" + fmt, *args))

    def write_string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.write("I", len(data))
        self._handle().write(data)
        self.align()

    def align(self, alignment: int = 4) -> None:
        """Skip forward to the next multiple of alignment."""
        remainder = self.tell() % alignment
        if remainder:
            self.seek(alignment - remainder, os.SEEK_CUR)

    def __enter__(self) -> "FileStream":
        return self

    def __exit__(self, *args) -> None:
        self.close()