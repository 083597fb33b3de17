from aigate.redaction.factory import RedactionPipelineFactory
from aigate.redaction.known_entity_scrubber import KnownEntityScrubber
from aigate.redaction.models import KnownNames, RedactionResult, RedactionStats
from aigate.redaction.pii_scrubber import PiiScrubber
from aigate.redaction.pipeline import RedactionPipeline

__all__ = [
    "KnownEntityScrubber",
    "KnownNames",
    "PiiScrubber",
    "RedactionPipeline",
    "RedactionPipelineFactory",
    "RedactionResult",
    "RedactionStats",
]
