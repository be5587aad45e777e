"""Path string helpers and the string hash used for lookups."""

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1


def _last_separator(path: str) -> int:
    return max(path.rfind("\\"), path.rfind("/"))


def get_directory_path(path: str) -> str:
    """Return everything before the last path separator, or an empty string."""
    index = _last_separator(path)
    return path[:index] if index >= 0 else ""


def get_file_name(path: str) -> str:
    """Return everything after the last path separator."""
    index = _last_separator(path)
    return path[index + 1:] if index >= 0 else path


def get_file_name_without_extension(path: str) -> str:
    """Return the file name with its last extension removed."""
    file_name = get_file_name(path)
    dot = file_name.rfind(".")
    return file_name[:dot] if dot >= 0 else file_name


def str_hash(value: str | bytes) -> int:
    """Return the 64-bit djb2 hash of a string, stopping at the first NUL."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    result = _HASH_SEED
    for byte in data:
        if byte == 0:
            break
        signed = byte - 256 if byte >= 128 else byte
        result = (result * 33 + signed) & _HASH_MASK
    return result