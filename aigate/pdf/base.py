from abc import ABC, abstractmethod

from aigate.pdf.models import ExtractedDocument


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractedDocument:
        """Extract plain text and page count from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractedDocument with the pages' text joined into one string.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
