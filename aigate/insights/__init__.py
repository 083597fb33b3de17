from aigate.insights.anonymizer import AnonymizedInsightData, StructuredAnonymizer
from aigate.insights.deanonymizer import Deanonymizer
from aigate.insights.models import AnonymizationMap, GeneratedInsight, InsightDataPackage

__all__ = [
    "AnonymizationMap",
    "AnonymizedInsightData",
    "Deanonymizer",
    "GeneratedInsight",
    "InsightDataPackage",
    "StructuredAnonymizer",
]
