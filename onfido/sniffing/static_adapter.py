"""Fixed content-type sniffer.

Useful when the caller already knows what it uploads, and in tests.
"""

from onfido.sniffing.base import BaseContentSniffer


class StaticContentSniffer(BaseContentSniffer):
    """Sniffer that reports the same MIME type for every file."""

    def __init__(self, mime_type: str = "image/jpeg") -> None:
        self._mime_type = mime_type

    def sniff(self, head: bytes) -> str:
        _ = head
        return self._mime_type
