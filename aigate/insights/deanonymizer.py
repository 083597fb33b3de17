import dataclasses

from aigate.insights.anonymizer import COMPANY_PSEUDONYM
from aigate.insights.models import AnonymizationMap, GeneratedInsight
from aigate.redaction.substitution import Replacement, longest_first, substitute


class Deanonymizer:
    """Restores real names in LLM-generated insight text."""

    def deanonymize(
        self,
        insights: list[GeneratedInsight],
        mapping: AnonymizationMap,
    ) -> list[GeneratedInsight]:
        """Return new records with pseudonyms in title, description and
        suggestion replaced by the real names. Input records are untouched.
        """
        # Longest pseudonym first: "Employee AB" must go before "Employee A".
        replacements = longest_first(self._build_replacements(mapping))
        return [self._restore(insight, replacements) for insight in insights]

    @staticmethod
    def _build_replacements(mapping: AnonymizationMap) -> list[Replacement]:
        return [
            *mapping.reverse_employees.items(),
            *mapping.reverse_projects.items(),
            (COMPANY_PSEUDONYM, mapping.company_name),
        ]

    @staticmethod
    def _restore(
        insight: GeneratedInsight,
        replacements: list[Replacement],
    ) -> GeneratedInsight:
        title, _ = substitute(insight.title, replacements)
        description, _ = substitute(insight.description, replacements)
        suggestion = (
            substitute(insight.suggestion, replacements)[0]
            if insight.suggestion
            else insight.suggestion
        )
        return dataclasses.replace(
            insight,
            title=title,
            description=description,
            suggestion=suggestion,
        )
