import os
from typing import BinaryIO
from urllib.parse import quote

DEFAULT_FILE_NAME = "document"


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")


def resolve_file_name(stream: BinaryIO, file_name: str | None) -> str:
    """Pick the announced file name: explicit, else the stream's basename, else a default."""
    if file_name:
        return file_name
    name = getattr(stream, "name", None)
    if isinstance(name, str) and name:
        return os.path.basename(name)
    return DEFAULT_FILE_NAME
