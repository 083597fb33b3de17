"""Contract redaction pipeline.

Processing flow:
1. Extract text and page count from the document bytes.
2. Short-circuit image-only scans (text density below the threshold).
3. Split into chunks and keep the commercially relevant ones.
4. Scrub generic PII (regex detectors).
5. Scrub the caller's known company, employee and project names.
"""

from aigate.logging.logger import Log
from aigate.pdf.base import BasePdfExtractor
from aigate.pdf.exceptions import PdfExtractionError
from aigate.redaction.chunker import split_into_chunks
from aigate.redaction.exceptions import RedactionError
from aigate.redaction.known_entity_scrubber import KnownEntityScrubber
from aigate.redaction.models import KnownNames, RedactionResult, RedactionStats
from aigate.redaction.pii_scrubber import PiiScrubber
from aigate.redaction.selector import MAX_SELECTED_CHUNKS, select_relevant_chunks

SCANNED_DENSITY_THRESHOLD = 100
CHUNK_SEPARATOR = "\n\n"


class RedactionPipeline:
    """Turns a contract document into text that is safe to send to an LLM."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        pii_scrubber: PiiScrubber | None = None,
        entity_scrubber: KnownEntityScrubber | None = None,
        max_chunks: int = MAX_SELECTED_CHUNKS,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._pii_scrubber = pii_scrubber or PiiScrubber()
        self._entity_scrubber = entity_scrubber or KnownEntityScrubber()
        self._max_chunks = max_chunks

    def redact_contract_text(
        self,
        document_bytes: bytes,
        known_names: KnownNames,
    ) -> RedactionResult:
        """Extract and redact a PDF document.

        Raises:
            PdfExtractionError: if the bytes are not a readable PDF.
            RedactionError: on any other failure.
        """
        extracted = self._pdf_extractor.extract(document_bytes)
        return self.redact_text(extracted.text, extracted.page_count, known_names)

    def redact_text(
        self,
        text: str,
        page_count: int,
        known_names: KnownNames,
    ) -> RedactionResult:
        """Redact already-extracted text spanning *page_count* pages."""
        try:
            return self._run(text, page_count, known_names)
        except (RedactionError, PdfExtractionError):
            raise
        except Exception as exc:
            raise RedactionError(f"Redaction failed: {exc}") from exc

    def _run(self, text: str, page_count: int, known_names: KnownNames) -> RedactionResult:
        density = len(text) / max(page_count, 1)
        if density < SCANNED_DENSITY_THRESHOLD:
            Log.info(
                f"Document looks scanned: {density:.0f} chars/page over {page_count} pages"
            )
            return RedactionResult(
                redacted_text="",
                is_scanned_pdf=True,
                stats=RedactionStats(original_length=len(text)),
            )

        chunks = split_into_chunks(text)
        relevant = select_relevant_chunks(chunks, self._max_chunks)
        selected_text = CHUNK_SEPARATOR.join(relevant)

        pii = self._pii_scrubber.scrub(selected_text)
        entities = self._entity_scrubber.scrub(pii.scrubbed_text, known_names)

        stats = RedactionStats(
            original_length=len(text),
            chunks_kept=len(relevant),
            chunks_total=len(chunks),
            redactions_applied=pii.count + entities.count,
        )
        Log.info(
            f"Redacted contract: kept {stats.chunks_kept}/{stats.chunks_total} chunks, "
            f"{stats.redactions_applied} redactions"
        )
        return RedactionResult(
            redacted_text=entities.scrubbed_text,
            is_scanned_pdf=False,
            stats=stats,
        )
