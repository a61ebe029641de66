from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import BinaryIO


class DocumentType(str, Enum):
    """Supported document types."""

    UNKNOWN = "unknown"
    PASSPORT = "passport"
    NATIONAL_IDENTITY_CARD = "national_identity_card"
    DRIVING_LICENCE = "driving_licence"
    UK_BIOMETRIC_RESIDENCE_PERMIT = "uk_biometric_residence_permit"
    TAX_ID = "tax_id"
    VOTER_ID = "voter_id"
    BANK_STATEMENT = "bank_statement"


class DocumentSide(str, Enum):
    """Document side."""

    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class DocumentUploadRequest:
    """Document upload for an applicant.

    The file must be seekable: it is read once to detect its content type
    and once more for the upload itself.
    """

    file: BinaryIO
    type: DocumentType
    side: DocumentSide | None = None
    issuing_country: str = ""


@dataclass(frozen=True)
class LivePhotoUploadRequest:
    """Live photo upload for an applicant."""

    applicant_id: str
    file: BinaryIO
    advanced_validation: bool = True


@dataclass(frozen=True)
class Document:
    """A document as returned by the API."""

    id: str
    created_at: datetime | None = None
    href: str = ""
    download_href: str = ""
    file_name: str = ""
    file_type: str = ""
    file_size: int = 0
    type: DocumentType = DocumentType.UNKNOWN
    side: DocumentSide | None = None
    issuing_country: str = ""


@dataclass(frozen=True)
class LivePhoto:
    """A live photo as returned by the API."""

    id: str
    created_at: datetime | None = None
    href: str = ""
    download_href: str = ""
    file_name: str = ""
    file_type: str = ""
    file_size: int = 0


@dataclass(frozen=True)
class DownloadedBlob:
    """Raw content of a downloaded document or live photo."""

    content: bytes
    size: int
