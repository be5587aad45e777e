"""Reading and writing of ``.ar`` archives, including split archives."""

import os
import re
import struct
from dataclasses import dataclass, field
from typing import Iterator

_HEADER = struct.Struct("<4I")
_ENTRY = struct.Struct("<5I")
_DATA_ALIGNMENT = 16
_ARL_SIGNATURE = 0x324C5241
_SPLIT_EXTENSION = re.compile(r"\.\d\d$")


@dataclass
class ArchiveEntry:
    name: str
    data: bytes


@dataclass
class Archive:
    entries: list = field(default_factory=list)

    def __iter__(self) -> Iterator[ArchiveEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> ArchiveEntry:
        return self.entries[index]

    def find(self, name: str) -> ArchiveEntry | None:
        return next((e for e in self.entries if e.name == name), None)

    def add_or_replace(self, name: str, data: bytes) -> None:
        """Replace the entry with this name in place, or append a new one."""
        new_entry = ArchiveEntry(name, bytes(data))
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                self.entries[index] = new_entry
                return
        self.entries.append(new_entry)


def _align(value: int, alignment: int) -> int:
    return (value + alignment - 1) // alignment * alignment


def save_archive(archive: Archive) -> bytes:
    """Serialise an archive with 16-byte aligned file data."""
    out = bytearray(_HEADER.pack(0, _HEADER.size, _ENTRY.size, _DATA_ALIGNMENT))
    for entry in archive:
        entry_pos = len(out)
        name = entry.name.encode("utf-8") + b"\0"
        data_pos = _align(entry_pos + _ENTRY.size + len(name), _DATA_ALIGNMENT)
        out += _ENTRY.pack(
            data_pos + len(entry.data) - entry_pos,
            len(entry.data),
            data_pos - entry_pos,
            0,
            0,
        )
        out += name
        out += bytes(data_pos - len(out))
        out += entry.data
    return bytes(out)


def parse_archive(data: bytes) -> Archive:
    """Parse archive bytes into an Archive."""
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise ValueError("archive is too small to hold a header")
    _, header_size, entry_size, _ = _HEADER.unpack_from(data)
    if entry_size < _ENTRY.size:
        raise ValueError(f"invalid entry size {entry_size}")

    archive = Archive()
    pos = header_size
    while pos < len(data):
        if pos + _ENTRY.size > len(data):
            raise ValueError(f"truncated entry at offset {pos}")
        size, data_size, data_offset, _, _ = _ENTRY.unpack_from(data, pos)
        if size == 0:
            raise ValueError(f"zero-sized entry at offset {pos}")
        start = pos + data_offset
        end = start + data_size
        if end > len(data):
            raise ValueError(f"entry data at offset {pos} runs past the end")
        name_start = pos + entry_size
        name_end = data.find(b"\0", name_start, start)
        if name_end < 0:
            raise ValueError(f"unterminated entry name at offset {pos}")
        archive.entries.append(
            ArchiveEntry(data[name_start:name_end].decode("utf-8"), data[start:end])
        )
        pos += size
    return archive


def _split_count(list_path: str) -> int | None:
    if not os.path.exists(list_path):
        return None
    with open(list_path, "rb") as file:
        header = file.read(8)
    if len(header) < 8:
        return None
    signature, count = struct.unpack("<2I", header)
    return count if signature == _ARL_SIGNATURE else None


def split_archive_paths(path) -> list:
    """Return the files that make up an archive, in load order.

    A path ending in a two-digit extension names a split archive; the
    ``.arl`` list next to it, when present, limits how many splits are read.
    """
    path = os.fspath(path)
    if not _SPLIT_EXTENSION.search(path):
        return [path]

    base = path[:-3]
    count = _split_count(base + "l")
    paths = []
    index = 0
    while count is None or index < count:
        candidate = f"{base}.{index:02d}"
        if not os.path.exists(candidate):
            break
        paths.append(candidate)
        index += 1
    return paths


def load_archive(path) -> Archive:
    """Load an archive, merging all splits of a split archive."""
    archive = Archive()
    for part in split_archive_paths(path):
        with open(part, "rb") as file:
            archive.entries.extend(parse_archive(file.read()).entries)
    return archive