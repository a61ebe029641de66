from onfido.client import Client
from onfido.exceptions import (
    OnfidoAPIError,
    OnfidoDecodeError,
    OnfidoEncodingError,
    OnfidoError,
    OnfidoTimeoutError,
    OnfidoTransportError,
)
from onfido.models import (
    Document,
    DocumentSide,
    DocumentType,
    DocumentUploadRequest,
    DownloadedBlob,
    LivePhoto,
    LivePhotoUploadRequest,
)
from onfido.pagination import PageIterator

__all__ = [
    "Client",
    "Document",
    "DocumentSide",
    "DocumentType",
    "DocumentUploadRequest",
    "DownloadedBlob",
    "LivePhoto",
    "LivePhotoUploadRequest",
    "OnfidoAPIError",
    "OnfidoDecodeError",
    "OnfidoEncodingError",
    "OnfidoError",
    "OnfidoTimeoutError",
    "OnfidoTransportError",
    "PageIterator",
]
