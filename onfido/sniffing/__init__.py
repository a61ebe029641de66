from onfido.sniffing.base import BaseContentSniffer
from onfido.sniffing.static_adapter import StaticContentSniffer

__all__ = ["BaseContentSniffer", "StaticContentSniffer"]
