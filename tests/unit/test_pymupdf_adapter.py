import pytest

from aigate.pdf.exceptions import PdfExtractionError
from aigate.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text_and_page_count(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert "Page one content" in result.text
        assert "Page two content" in result.text
        assert result.page_count == 2

    def test_extract_empty_pdf(self, empty_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(empty_pdf_bytes)
        assert result.text == ""
        assert result.page_count == 1

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError, match="pymupdf"):
            PyMuPdfAdapter().extract(b"not a pdf")
