import pytest

from onfido.sniffing.base import BaseContentSniffer
from onfido.sniffing.static_adapter import StaticContentSniffer

PNG_HEADER = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00"


class TestStaticContentSniffer:
    def test_implements_base_contract(self) -> None:
        assert isinstance(StaticContentSniffer(), BaseContentSniffer)

    def test_default_type(self) -> None:
        assert StaticContentSniffer().sniff(b"anything") == "image/jpeg"

    def test_ignores_content(self) -> None:
        sniffer = StaticContentSniffer("application/pdf")
        assert sniffer.sniff(PNG_HEADER) == "application/pdf"


class TestMagicContentSniffer:
    @pytest.fixture()
    def sniffer(self) -> BaseContentSniffer:
        pytest.importorskip("magic", exc_type=ImportError)
        from onfido.sniffing.magic_adapter import MagicContentSniffer

        return MagicContentSniffer()

    def test_detects_png(self, sniffer: BaseContentSniffer) -> None:
        assert sniffer.sniff(PNG_HEADER) == "image/png"

    def test_detects_pdf(self, sniffer: BaseContentSniffer) -> None:
        assert sniffer.sniff(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n") == "application/pdf"

    def test_detects_plain_text(self, sniffer: BaseContentSniffer) -> None:
        assert sniffer.sniff(b"test").startswith("text/plain")
