"""Company-performance data sent for insight generation, and the records
that come back from the LLM.

The package itself is produced by an external data-gathering collaborator;
only its name-bearing fields matter to the anonymizer.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class CompanyInfo:
    id: str | None
    name: str
    currency: str


@dataclass
class TeamMember:
    id: str | None
    name: str
    weekly_target: float
    vacation_days: float
    avg_hours_last_4_weeks: float
    utilization_percent: float
    total_hours_last_30_days: float


@dataclass
class Team:
    members: list[TeamMember] = field(default_factory=list)
    total_capacity_hours_weekly: float = 0.0


@dataclass
class WeeklyUserHours:
    user_id: str | None
    user_name: str
    week_start: str
    hours: float
    weekly_target: float


@dataclass
class OverworkedUser:
    name: str
    avg_hours: float
    weeks_over_40: int


@dataclass
class UnderutilizedUser:
    name: str
    avg_utilization: float


@dataclass
class WeekendWorker:
    name: str
    weekend_days: int


@dataclass
class WorkloadMetrics:
    weekly_hours_by_user: list[WeeklyUserHours] = field(default_factory=list)
    users_overworked: list[OverworkedUser] = field(default_factory=list)
    users_underutilized: list[UnderutilizedUser] = field(default_factory=list)
    weekend_workers: list[WeekendWorker] = field(default_factory=list)


@dataclass
class UpcomingVacation:
    user_name: str
    start_date: str
    end_date: str
    type: str
    business_days: int


@dataclass
class CapacityReduction:
    date: str
    available_percent: float


@dataclass
class Vacations:
    upcoming: list[UpcomingVacation] = field(default_factory=list)
    capacity_reductions: list[CapacityReduction] = field(default_factory=list)


@dataclass
class ProjectTeamMember:
    name: str
    hours: float
    percent: float


@dataclass
class ProjectHealth:
    id: str | None
    name: str
    budget_hours: float | None
    hours_used: float
    percent_used: float | None
    weekly_burn_rate: float
    team_members: list[ProjectTeamMember] = field(default_factory=list)


@dataclass
class SinglePersonRisk:
    project_name: str
    user_name: str
    percent_of_work: float


@dataclass
class Projects:
    active: list[ProjectHealth] = field(default_factory=list)
    single_person_risks: list[SinglePersonRisk] = field(default_factory=list)


@dataclass
class BillableWeek:
    week_start: str
    billable_percent: float


@dataclass
class EntryGap:
    name: str
    missed_days: int


@dataclass
class Productivity:
    billable_percent_by_week: list[BillableWeek] = field(default_factory=list)
    pending_approvals: int = 0
    users_with_entry_gaps: list[EntryGap] = field(default_factory=list)


@dataclass
class ContractSummary:
    project_name: str
    max_hours: float | None
    max_budget: float | None
    deadline: str | None
    scope: str | None
    hours_used: float


@dataclass
class ResourceAllocation:
    user_name: str
    project_name: str
    start_date: str
    end_date: str
    hours_per_day: float
    status: str


@dataclass
class CapacityForecast:
    date: str
    total_allocated_hours: float
    total_capacity_hours: float
    utilization_percent: float
    overbooked_users: list[str] = field(default_factory=list)
    underbooked_users: list[str] = field(default_factory=list)


@dataclass
class UnassignedUser:
    name: str
    weekly_target: float
    available_hours: float


@dataclass
class UnderstaffedProject:
    project_name: str
    allocated_hours: float
    estimated_need: float


@dataclass
class ResourcePlanning:
    allocations: list[ResourceAllocation] = field(default_factory=list)
    capacity_forecast: list[CapacityForecast] = field(default_factory=list)
    unassigned_users: list[UnassignedUser] = field(default_factory=list)
    understaffed_projects: list[UnderstaffedProject] = field(default_factory=list)


@dataclass
class InsightDataPackage:
    company: CompanyInfo
    team: Team = field(default_factory=Team)
    workload_metrics: WorkloadMetrics = field(default_factory=WorkloadMetrics)
    vacations: Vacations = field(default_factory=Vacations)
    projects: Projects = field(default_factory=Projects)
    productivity: Productivity = field(default_factory=Productivity)
    contracts: list[ContractSummary] = field(default_factory=list)
    resource_planning: ResourcePlanning = field(default_factory=ResourcePlanning)


@dataclass(frozen=True)
class AnonymizationMap:
    """Bidirectional real <-> pseudonym lookup for one anonymization call.

    Held in memory for the duration of a request only. Dict insertion order
    follows the alphabetical order of the real names.
    """

    employees: dict[str, str]
    projects: dict[str, str]
    company_name: str
    reverse_employees: dict[str, str]
    reverse_projects: dict[str, str]


class InsightCategory(str, Enum):
    OPPORTUNITY = "OPPORTUNITY"
    INSIGHT = "INSIGHT"
    SUGGESTION = "SUGGESTION"
    HEADS_UP = "HEADS_UP"
    CELEBRATION = "CELEBRATION"


@dataclass(frozen=True)
class GeneratedInsight:
    """A single insight record produced by the LLM."""

    category: InsightCategory
    title: str
    description: str
    suggestion: str | None = None
    related_hours: float | None = None
    related_amount: float | None = None
