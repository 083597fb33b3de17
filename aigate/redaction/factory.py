from aigate.config.settings import Settings
from aigate.pdf.factory import PdfExtractorFactory
from aigate.redaction.pipeline import RedactionPipeline


class RedactionPipelineFactory:
    """Creates a redaction pipeline wired to the configured PDF engine."""

    @classmethod
    def create(cls, settings: Settings) -> RedactionPipeline:
        return RedactionPipeline(pdf_extractor=PdfExtractorFactory.create(settings))
