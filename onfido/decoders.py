"""Builds typed results from JSON response bodies."""

import json
from datetime import datetime
from typing import Any

from onfido.exceptions import OnfidoDecodeError
from onfido.logging.logger import Log
from onfido.models import Document, DocumentSide, DocumentType, LivePhoto


def load_object(body: bytes) -> dict[str, Any]:
    """Parse a JSON object from a response body.

    Raises:
        OnfidoDecodeError: if the body is not valid JSON or not an object.
    """
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise OnfidoDecodeError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise OnfidoDecodeError("JSON response must be an object")
    return parsed


def decode_document(body: bytes) -> Document:
    return build_document(load_object(body))


def decode_document_list(body: bytes) -> list[Document]:
    return [build_document(item) for item in _collection(load_object(body), "documents")]


def decode_live_photo(body: bytes) -> LivePhoto:
    return build_live_photo(load_object(body))


def decode_live_photo_list(body: bytes) -> list[LivePhoto]:
    return [build_live_photo(item) for item in _collection(load_object(body), "live_photos")]


def build_document(data: Any) -> Document:
    """Build a Document from a decoded JSON object.

    Raises:
        OnfidoDecodeError: if a field has the wrong type.
    """
    if not isinstance(data, dict):
        raise OnfidoDecodeError("'document' must be an object")
    return Document(
        id=_str(data, "id"),
        created_at=_datetime(data, "created_at"),
        href=_str(data, "href"),
        download_href=_str(data, "download_href"),
        file_name=_str(data, "file_name"),
        file_type=_str(data, "file_type"),
        file_size=_int(data, "file_size"),
        type=_document_type(_str(data, "type")),
        side=_document_side(_str(data, "side")),
        issuing_country=_str(data, "issuing_country"),
    )


def build_live_photo(data: Any) -> LivePhoto:
    """Build a LivePhoto from a decoded JSON object.

    Raises:
        OnfidoDecodeError: if a field has the wrong type.
    """
    if not isinstance(data, dict):
        raise OnfidoDecodeError("'live_photo' must be an object")
    return LivePhoto(
        id=_str(data, "id"),
        created_at=_datetime(data, "created_at"),
        href=_str(data, "href"),
        download_href=_str(data, "download_href"),
        file_name=_str(data, "file_name"),
        file_type=_str(data, "file_type"),
        file_size=_int(data, "file_size"),
    )


def _collection(data: dict[str, Any], key: str) -> list[Any]:
    if key not in data:
        raise OnfidoDecodeError(f"Missing required top-level field: {key}")
    items = data[key]
    if not isinstance(items, list):
        raise OnfidoDecodeError(f"'{key}' must be a list")
    return items


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise OnfidoDecodeError(f"'{key}' must be a string or null")
    return value


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise OnfidoDecodeError(f"'{key}' must be an integer or null")
    return value


def _datetime(data: dict[str, Any], key: str) -> datetime | None:
    raw = _str(data, key)
    if not raw:
        return None
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise OnfidoDecodeError(f"'{key}' must be an ISO-8601 timestamp: {exc}") from exc


def _document_type(raw: str) -> DocumentType:
    if not raw:
        return DocumentType.UNKNOWN
    try:
        return DocumentType(raw)
    except ValueError:
        Log.warning(f"Unrecognised document type '{raw}', using 'unknown'")
        return DocumentType.UNKNOWN


def _document_side(raw: str) -> DocumentSide | None:
    if not raw:
        return None
    try:
        return DocumentSide(raw)
    except ValueError:
        Log.warning(f"Unrecognised document side '{raw}', ignoring")
        return None
