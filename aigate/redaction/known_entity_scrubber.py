from aigate.redaction.models import KnownNames, ScrubResult
from aigate.redaction.substitution import Replacement, longest_first, substitute

COMPANY_PLACEHOLDER = "[COMPANY]"
MIN_NAME_PART_LENGTH = 3


class KnownEntityScrubber:
    """Replaces the caller's company, employee and project names."""

    def scrub(self, text: str, names: KnownNames) -> ScrubResult:
        """Substitute every known name, longest string first.

        Returns:
            ScrubResult with the scrubbed text and the number of distinct
            name strings that were found.
        """
        replacements = longest_first(self._build_replacements(names))
        scrubbed, matched = substitute(text, replacements)
        return ScrubResult(scrubbed_text=scrubbed, count=matched)

    def _build_replacements(self, names: KnownNames) -> list[Replacement]:
        replacements: list[Replacement] = []
        company_name = names.company_name.strip()
        if company_name:
            replacements.append((company_name, COMPANY_PLACEHOLDER))

        # First/last name parts share the full name's number so "Anna" and
        # "Anna Berg" resolve to the same person.
        employee_names = [n.strip() for n in names.employee_names if n.strip()]
        assigned: set[str] = set()
        for i, full_name in enumerate(employee_names, start=1):
            placeholder = f"[PERSON_{i}]"
            assigned.add(full_name)
            replacements.append((full_name, placeholder))
            parts = full_name.split()
            if len(parts) < 2:
                continue
            for part in parts:
                if len(part) >= MIN_NAME_PART_LENGTH and part not in assigned:
                    assigned.add(part)
                    replacements.append((part, placeholder))

        project_names = [n.strip() for n in names.project_names if n.strip()]
        for j, project_name in enumerate(project_names, start=1):
            replacements.append((project_name, f"[PROJECT_{j}]"))

        return replacements
