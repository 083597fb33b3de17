"""Pseudonymization of structured insight data.

Processing flow:
1. Collect every distinct employee and project name from the known
   name-bearing fields.
2. Sort both sets alphabetically so a given roster always yields the same
   pseudonyms.
3. Assign ``Employee A..Z, AA, AB, ...`` and ``Project Alpha..Omega``
   (then ``Project <n>``).
4. Deep-copy the package and overwrite names and raw ids in the copy.
5. Scrub free-text contract scopes with the same mapping.
"""

import copy
import string
from dataclasses import dataclass
from typing import ClassVar

from aigate.insights.exceptions import AnonymizationError
from aigate.insights.models import AnonymizationMap, InsightDataPackage
from aigate.logging.logger import Log
from aigate.redaction.substitution import Replacement, longest_first, substitute

COMPANY_PSEUDONYM = "The Company"


@dataclass(frozen=True)
class AnonymizedInsightData:
    anonymized_data: InsightDataPackage
    map: AnonymizationMap


def employee_pseudonym(index: int) -> str:
    """Return ``Employee A`` for 0, ``Employee Z`` for 25, ``Employee AA`` for 26..."""
    letters = ""
    n = index + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters = string.ascii_uppercase[remainder] + letters
    return f"Employee {letters}"


def project_pseudonym(index: int) -> str:
    if index < len(StructuredAnonymizer.PROJECT_NAMES):
        return f"Project {StructuredAnonymizer.PROJECT_NAMES[index]}"
    return f"Project {index + 1}"


class StructuredAnonymizer:
    """Replaces employee, project and company names in an InsightDataPackage."""

    PROJECT_NAMES: ClassVar[tuple[str, ...]] = (
        "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
        "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho",
        "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
    )

    def anonymize(self, data: InsightDataPackage) -> AnonymizedInsightData:
        """Build the pseudonym map and a fully anonymized copy of *data*.

        The input package is never modified.

        Raises:
            AnonymizationError: on any failure.
        """
        try:
            return self._run(data)
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    def _run(self, data: InsightDataPackage) -> AnonymizedInsightData:
        employees: dict[str, str] = {}
        reverse_employees: dict[str, str] = {}
        for i, name in enumerate(sorted(self._collect_employee_names(data))):
            pseudonym = employee_pseudonym(i)
            employees[name] = pseudonym
            reverse_employees[pseudonym] = name

        projects: dict[str, str] = {}
        reverse_projects: dict[str, str] = {}
        for i, name in enumerate(sorted(self._collect_project_names(data))):
            pseudonym = project_pseudonym(i)
            projects[name] = pseudonym
            reverse_projects[pseudonym] = name

        mapping = AnonymizationMap(
            employees=employees,
            projects=projects,
            company_name=data.company.name,
            reverse_employees=reverse_employees,
            reverse_projects=reverse_projects,
        )

        anonymized = copy.deepcopy(data)
        self._replace_fields(anonymized, mapping)

        Log.info(
            f"Anonymized insight data: {len(employees)} employees, "
            f"{len(projects)} projects"
        )
        return AnonymizedInsightData(anonymized_data=anonymized, map=mapping)

    # ------------------------------------------------------------------
    # Name collection
    # ------------------------------------------------------------------

    @staticmethod
    def _collect_employee_names(data: InsightDataPackage) -> set[str]:
        workload = data.workload_metrics
        planning = data.resource_planning
        names: list[str] = [
            *(m.name for m in data.team.members),
            *(w.user_name for w in workload.weekly_hours_by_user),
            *(o.name for o in workload.users_overworked),
            *(u.name for u in workload.users_underutilized),
            *(w.name for w in workload.weekend_workers),
            *(v.user_name for v in data.vacations.upcoming),
            *(tm.name for p in data.projects.active for tm in p.team_members),
            *(r.user_name for r in data.projects.single_person_risks),
            *(g.name for g in data.productivity.users_with_entry_gaps),
            *(a.user_name for a in planning.allocations),
            *(u.name for u in planning.unassigned_users),
            *(n for f in planning.capacity_forecast for n in f.overbooked_users),
            *(n for f in planning.capacity_forecast for n in f.underbooked_users),
        ]
        return {name for name in names if name.strip()}

    @staticmethod
    def _collect_project_names(data: InsightDataPackage) -> set[str]:
        planning = data.resource_planning
        names: list[str] = [
            *(p.name for p in data.projects.active),
            *(r.project_name for r in data.projects.single_person_risks),
            *(c.project_name for c in data.contracts),
            *(a.project_name for a in planning.allocations),
            *(u.project_name for u in planning.understaffed_projects),
        ]
        return {name for name in names if name.strip()}

    # ------------------------------------------------------------------
    # Field replacement (operates on the copy only)
    # ------------------------------------------------------------------

    @staticmethod
    def _replace_fields(anon: InsightDataPackage, mapping: AnonymizationMap) -> None:
        def emp(name: str) -> str:
            return mapping.employees.get(name, name)

        def proj(name: str) -> str:
            return mapping.projects.get(name, name)

        anon.company.name = COMPANY_PSEUDONYM
        anon.company.id = None

        for member in anon.team.members:
            member.name = emp(member.name)
            member.id = None

        workload = anon.workload_metrics
        for row in workload.weekly_hours_by_user:
            row.user_name = emp(row.user_name)
            row.user_id = None
        for overworked in workload.users_overworked:
            overworked.name = emp(overworked.name)
        for underutilized in workload.users_underutilized:
            underutilized.name = emp(underutilized.name)
        for weekend in workload.weekend_workers:
            weekend.name = emp(weekend.name)

        for vacation in anon.vacations.upcoming:
            vacation.user_name = emp(vacation.user_name)

        for project in anon.projects.active:
            project.name = proj(project.name)
            project.id = None
            for team_member in project.team_members:
                team_member.name = emp(team_member.name)
        for risk in anon.projects.single_person_risks:
            risk.project_name = proj(risk.project_name)
            risk.user_name = emp(risk.user_name)

        for gap in anon.productivity.users_with_entry_gaps:
            gap.name = emp(gap.name)

        planning = anon.resource_planning
        for allocation in planning.allocations:
            allocation.user_name = emp(allocation.user_name)
            allocation.project_name = proj(allocation.project_name)
        for forecast in planning.capacity_forecast:
            forecast.overbooked_users = [emp(n) for n in forecast.overbooked_users]
            forecast.underbooked_users = [emp(n) for n in forecast.underbooked_users]
        for unassigned in planning.unassigned_users:
            unassigned.name = emp(unassigned.name)
        for understaffed in planning.understaffed_projects:
            understaffed.project_name = proj(understaffed.project_name)

        text_replacements = longest_first(_scope_replacements(mapping))
        for contract in anon.contracts:
            contract.project_name = proj(contract.project_name)
            if contract.scope:
                contract.scope, _ = substitute(contract.scope, text_replacements)


def _scope_replacements(mapping: AnonymizationMap) -> list[Replacement]:
    return [
        (mapping.company_name, COMPANY_PSEUDONYM),
        *mapping.employees.items(),
        *mapping.projects.items(),
    ]
