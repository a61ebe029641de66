from abc import ABC, abstractmethod


class BaseContentSniffer(ABC):
    """Contract for content-type detection adapters."""

    @abstractmethod
    def sniff(self, head: bytes) -> str:
        """Detect the MIME type of a file from its leading bytes.

        Args:
            head: Up to the first 512 bytes of the file.

        Returns:
            A MIME type such as "image/png".

        Raises:
            OnfidoEncodingError: if detection fails.
        """
