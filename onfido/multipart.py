"""multipart/form-data encoding for file uploads.

The body is built fully in memory so that nothing is sent when encoding
fails. The file part's Content-Type is sniffed from its content because the
API rejects application/octet-stream.
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO

from onfido.exceptions import OnfidoEncodingError
from onfido.sniffing.base import BaseContentSniffer

SNIFF_LENGTH = 512

_CRLF = b"\r\n"


@dataclass(frozen=True)
class MultipartBody:
    """Encoded request body and its matching Content-Type header."""

    content: bytes
    content_type: str


def escape_quotes(value: str) -> str:
    """Escape a value for use inside a quoted header parameter."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def encode_upload(
    stream: BinaryIO,
    *,
    field_name: str,
    file_name: str,
    fields: Iterable[tuple[str, str | None]],
    sniffer: BaseContentSniffer,
) -> MultipartBody:
    """Encode a file part followed by scalar form fields.

    Args:
        stream: Seekable binary stream holding the file content.
        field_name: Form field name of the file part.
        file_name: File name announced for the file part.
        fields: (name, value) pairs appended after the file; empty values are skipped.
        sniffer: Detects the file part's Content-Type.

    Returns:
        MultipartBody with the encoded bytes and the boundary Content-Type.

    Raises:
        OnfidoEncodingError: if the stream cannot be read or rewound, or sniffing fails.
    """
    head = _read_head(stream)
    content_type = sniffer.sniff(head)
    _rewind(stream)
    data = _read_all(stream)

    boundary = uuid.uuid4().hex
    parts: list[bytes] = [
        _file_part_header(boundary, field_name, file_name, content_type),
        data,
        _CRLF,
    ]
    for name, value in fields:
        if not value:
            continue
        parts.append(_field_part(boundary, name, value))
    parts.append(f"--{boundary}--".encode("utf-8") + _CRLF)

    return MultipartBody(
        content=b"".join(parts),
        content_type=f"multipart/form-data; boundary={boundary}",
    )


def _read_head(stream: BinaryIO) -> bytes:
    try:
        if not stream.seekable():
            raise OnfidoEncodingError("Upload stream must be seekable")
        head = stream.read(SNIFF_LENGTH)
    except (OSError, ValueError) as exc:
        raise OnfidoEncodingError(f"Failed to read upload stream: {exc}") from exc
    if not head:
        raise OnfidoEncodingError("Upload stream is empty")
    return head


def _rewind(stream: BinaryIO) -> None:
    try:
        stream.seek(0)
    except (OSError, ValueError) as exc:
        raise OnfidoEncodingError(f"Failed to rewind upload stream: {exc}") from exc


def _read_all(stream: BinaryIO) -> bytes:
    try:
        return stream.read()
    except (OSError, ValueError) as exc:
        raise OnfidoEncodingError(f"Failed to read upload stream: {exc}") from exc


def _file_part_header(boundary: str, field_name: str, file_name: str, content_type: str) -> bytes:
    disposition = (
        f'form-data; name="{escape_quotes(field_name)}"; '
        f'filename="{escape_quotes(file_name)}"'
    )
    return (
        f"--{boundary}\r\n"
        f"Content-Disposition: {disposition}\r\n"
        f"Content-Type: {content_type}\r\n\r\n"
    ).encode("utf-8")


def _field_part(boundary: str, name: str, value: str) -> bytes:
    return (
        f"--{boundary}\r\n"
        f'Content-Disposition: form-data; name="{escape_quotes(name)}"\r\n\r\n'
        f"{value}\r\n"
    ).encode("utf-8")
