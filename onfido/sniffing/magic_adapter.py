import magic

from onfido.exceptions import OnfidoEncodingError
from onfido.sniffing.base import BaseContentSniffer


class MagicContentSniffer(BaseContentSniffer):
    """Content sniffer built on libmagic."""

    def __init__(self) -> None:
        self._detector = magic.Magic(mime=True)

    def sniff(self, head: bytes) -> str:
        try:
            mime_type = self._detector.from_buffer(head)
        except magic.MagicException as exc:
            raise OnfidoEncodingError(f"Content type detection failed: {exc}") from exc
        if not mime_type:
            raise OnfidoEncodingError("Content type detection returned nothing")
        return mime_type
