"""
TestRail API client.

One method per TestRail API command. Every method returns a RequestResult;
nothing here raises for remote or input errors.
"""
import logging
from datetime import datetime
from urllib.parse import quote
from typing import Any, Collection, Dict, List, Mapping, Optional

from core.config import TestRailConfig
from core.domain.case import Case, CaseField, CaseType, Priority
from core.domain.enums import CommandAction, CommandType, RequestType, ResultStatus
from core.domain.json_fields import merge
from core.domain.plan import Plan, PlanEntry
from core.domain.project import Milestone, Project, Section, Suite
from core.domain.result import RequestResult
from core.domain.run import BulkResults, Result, Run, Status, Test
from core.domain.user import ConfigurationGroup, User
from core.interfaces.transport import ITransport
from core.services.lazy_value import LazyValue
from core.services.list_decoder import many, single
from .dispatcher import RequestDispatcher
from .endpoints import build_address
from .http_client import TestRailHttpClient

logger = logging.getLogger(__name__)

CASES_NOT_IN_SUITE = "Case IDs not found in the Suite"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _status_filter(
    status_ids: Optional[Collection[ResultStatus]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None
) -> str:
    """Build the query options shared by the get_results* commands."""
    options = ""
    if status_ids:
        options += "&status_id=" + ",".join(str(int(s)) for s in status_ids)
    if limit is not None:
        options += f"&limit={limit}"
    if offset is not None:
        options += f"&offset={offset}"
    return options


class TestRailClient:
    """Typed client for the TestRail API v2."""
    __test__ = False  # not a pytest test class

    def __init__(
        self,
        config: TestRailConfig,
        transport: Optional[ITransport] = None
    ):
        """Initialize TestRail client.

        Args:
            config: Connection settings
            transport: HTTP transport (defaults to TestRailHttpClient)
        """
        self._config = config
        self._dispatcher = RequestDispatcher(
            config,
            transport or TestRailHttpClient(timeout=config.timeout)
        )
        self._projects: LazyValue[List[Project]] = LazyValue(
            self._load_projects, name="project list"
        )
        self._priority_levels: LazyValue[Dict[int, int]] = LazyValue(
            self._load_priority_levels, name="priority levels"
        )

    @property
    def config(self) -> TestRailConfig:
        return self._config

    # Cached lookups

    @property
    def projects(self) -> List[Project]:
        """All projects, fetched once per client (empty if the fetch failed)."""
        return self._projects.get()

    @property
    def priority_levels(self) -> Dict[int, int]:
        """Priority id -> priority level, fetched once per client."""
        return self._priority_levels.get()

    def get_priority_for_case(self, case: Optional[Case]) -> Optional[int]:
        """Priority level of a case.

        Args:
            case: Test case

        Returns:
            Priority level, or None when the case has no known priority
        """
        if case is None or case.priority_id is None:
            return None
        return self.priority_levels.get(case.priority_id)

    def _load_projects(self) -> List[Project]:
        result = self.get_projects()
        if not result.is_success:
            logger.error("Could not load projects: %s", result.failure_message)
            return []
        return [p for p in result.payload or [] if p is not None]

    def _load_priority_levels(self) -> Dict[int, int]:
        result = self.get_priorities()
        if not result.is_success:
            logger.error("Could not load priorities: %s", result.failure_message)
            return {}
        return {
            priority.id: priority.priority_level
            for priority in result.payload or []
            if priority is not None
        }

    # Add commands

    def add_result(
        self,
        test_id: int,
        status: Optional[ResultStatus],
        comment: Optional[str] = None,
        version: Optional[str] = None,
        elapsed: Optional[str] = None,
        defects: Optional[str] = None,
        assigned_to_id: Optional[int] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Result]:
        """Add a result, comment or assignment to a test.

        Args:
            test_id: Test ID
            status: Result status
            comment: Result comment
            version: Version or build tested against
            elapsed: Time spent, e.g. "30s" or "1m 45s"
            defects: Comma-separated defect ids
            assigned_to_id: User the test should be assigned to
            customs: ``custom_*`` fields

        Returns:
            The new result
        """
        address = build_address(CommandType.ADD, CommandAction.RESULT, test_id)
        result = Result(
            test_id=test_id,
            status_id=status,
            comment=comment,
            version=version,
            elapsed=elapsed,
            defects=defects,
            assignedto_id=assigned_to_id,
        )
        return self._send_post(address, single(Result), merge(result.to_json(), customs))

    def add_results(self, run_id: int, results: BulkResults) -> RequestResult[List[Result]]:
        """Add several results to tests of one run."""
        address = build_address(CommandType.ADD, CommandAction.RESULTS, run_id)
        return self._send_post(address, many(Result), results.to_json())

    def add_result_for_case(
        self,
        run_id: int,
        case_id: int,
        status: Optional[ResultStatus],
        comment: Optional[str] = None,
        version: Optional[str] = None,
        elapsed: Optional[str] = None,
        defects: Optional[str] = None,
        assigned_to_id: Optional[int] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Result]:
        """Add a result for a case within a run."""
        address = build_address(CommandType.ADD, CommandAction.RESULT_FOR_CASE, run_id, case_id)
        result = Result(
            status_id=status,
            comment=comment,
            version=version,
            elapsed=elapsed,
            defects=defects,
            assignedto_id=assigned_to_id,
        )
        return self._send_post(address, single(Result), merge(result.to_json(), customs))

    def add_results_for_cases(self, run_id: int, results: BulkResults) -> RequestResult[List[Result]]:
        """Add several results to a run, addressed by case id."""
        address = build_address(CommandType.ADD, CommandAction.RESULTS_FOR_CASES, run_id)
        return self._send_post(address, many(Result), results.to_json())

    def add_run(
        self,
        project_id: int,
        suite_id: Optional[int],
        name: str,
        description: Optional[str] = None,
        milestone_id: Optional[int] = None,
        assigned_to_id: Optional[int] = None,
        case_ids: Optional[Collection[int]] = None,
        customs: Optional[Mapping[str, Any]] = None,
        include_all: bool = True
    ) -> RequestResult[Run]:
        """Create a test run.

        When ``case_ids`` and ``suite_id`` are given, at least one of the ids
        must belong to the suite; the run then uses a custom case selection.

        Args:
            project_id: Project ID
            suite_id: Suite ID (required for multi-suite projects)
            name: Run name
            description: Run description
            milestone_id: Milestone to link
            assigned_to_id: User the run is assigned to
            case_ids: Case IDs for a custom selection
            customs: ``custom_*`` fields
            include_all: Include every case of the suite

        Returns:
            The new run, or BAD_REQUEST if no case id is in the suite
        """
        if case_ids is not None and suite_id is not None:
            if not self._cases_found_in_suite(project_id, suite_id, case_ids):
                logger.info("Rejected add_run: none of %s in suite %s", sorted(case_ids), suite_id)
                return RequestResult.bad_request(CASES_NOT_IN_SUITE)
            include_all = False

        address = build_address(CommandType.ADD, CommandAction.RUN, project_id)
        run = Run(
            suite_id=suite_id,
            name=name,
            description=description,
            milestone_id=milestone_id,
            assignedto_id=assigned_to_id,
            include_all=include_all,
            case_ids=set(case_ids) if case_ids is not None else None,
        )
        return self._send_post(address, single(Run), merge(run.to_json(), customs))

    def add_case(
        self,
        section_id: int,
        title: str,
        type_id: Optional[int] = None,
        priority_id: Optional[int] = None,
        estimate: Optional[str] = None,
        milestone_id: Optional[int] = None,
        refs: Optional[str] = None,
        custom_fields: Optional[Mapping[str, Any]] = None,
        template_id: Optional[int] = None
    ) -> RequestResult[Case]:
        """Create a test case.

        Args:
            section_id: Section the case is added to
            title: Case title (required)
            type_id: Case type ID
            priority_id: Priority ID
            estimate: Estimate, e.g. "30s" or "1m 45s"
            milestone_id: Milestone to link
            refs: Comma-separated references
            custom_fields: ``custom_*`` fields, e.g. custom_preconds
            template_id: Template (field layout) ID

        Returns:
            The new case, or BAD_REQUEST for a blank title
        """
        if _is_blank(title):
            return self._reject("add_case", "title")

        address = build_address(CommandType.ADD, CommandAction.CASE, section_id)
        case = Case(
            title=title,
            type_id=type_id,
            priority_id=priority_id,
            estimate=estimate,
            milestone_id=milestone_id,
            refs=refs,
            template_id=template_id,
        )
        return self._send_post(address, single(Case), merge(case.to_json(), custom_fields))

    def add_project(
        self,
        project_name: str,
        announcement: Optional[str] = None,
        show_announcement: Optional[bool] = None
    ) -> RequestResult[Project]:
        """Create a project (admin only)."""
        if _is_blank(project_name):
            return self._reject("add_project", "project_name")

        address = build_address(CommandType.ADD, CommandAction.PROJECT)
        project = Project(
            name=project_name,
            announcement=announcement,
            show_announcement=show_announcement,
        )
        return self._send_post(address, single(Project), project.to_json())

    def add_section(
        self,
        project_id: int,
        suite_id: int,
        name: str,
        parent_id: Optional[int] = None,
        description: Optional[str] = None
    ) -> RequestResult[Section]:
        """Create a section, optionally nested under ``parent_id``."""
        if _is_blank(name):
            return self._reject("add_section", "name")

        address = build_address(CommandType.ADD, CommandAction.SECTION, project_id)
        section = Section(
            suite_id=suite_id,
            parent_id=parent_id,
            name=name,
            description=description,
        )
        return self._send_post(address, single(Section), section.to_json())

    def add_suite(
        self,
        project_id: int,
        name: str,
        description: Optional[str] = None
    ) -> RequestResult[Suite]:
        """Create a test suite."""
        if _is_blank(name):
            return self._reject("add_suite", "name")

        address = build_address(CommandType.ADD, CommandAction.SUITE, project_id)
        suite = Suite(name=name, description=description)
        return self._send_post(address, single(Suite), suite.to_json())

    def add_plan(
        self,
        project_id: int,
        name: str,
        description: Optional[str] = None,
        milestone_id: Optional[int] = None,
        entries: Optional[List[PlanEntry]] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Plan]:
        """Create a test plan."""
        if _is_blank(name):
            return self._reject("add_plan", "name")

        address = build_address(CommandType.ADD, CommandAction.PLAN, project_id)
        plan = Plan(
            name=name,
            description=description,
            milestone_id=milestone_id,
            entries=entries,
        )
        return self._send_post(address, single(Plan), merge(plan.to_json(), customs))

    def add_plan_entry(
        self,
        plan_id: int,
        suite_id: int,
        name: Optional[str] = None,
        assigned_to_id: Optional[int] = None,
        case_ids: Optional[List[int]] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[PlanEntry]:
        """Add one or more runs to a plan."""
        address = build_address(CommandType.ADD, CommandAction.PLAN_ENTRY, plan_id)
        entry = PlanEntry(
            suite_id=suite_id,
            name=name,
            assignedto_id=assigned_to_id,
            case_ids=case_ids,
        )
        return self._send_post(address, single(PlanEntry), merge(entry.to_json(), customs))

    def add_milestone(
        self,
        project_id: int,
        name: str,
        description: Optional[str] = None,
        parent_id: Optional[int] = None,
        due_on: Optional[datetime] = None
    ) -> RequestResult[Milestone]:
        """Create a milestone."""
        address = build_address(CommandType.ADD, CommandAction.MILESTONE, project_id)
        milestone = Milestone(
            name=name,
            description=description,
            parent_id=parent_id,
            due_on=due_on,
        )
        return self._send_post(address, single(Milestone), milestone.to_json())

    # Update commands

    def update_case(
        self,
        case_id: int,
        title: str,
        type_id: Optional[int] = None,
        priority_id: Optional[int] = None,
        estimate: Optional[str] = None,
        milestone_id: Optional[int] = None,
        refs: Optional[str] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Case]:
        """Update a test case; only given fields are sent."""
        if _is_blank(title):
            return self._reject("update_case", "title")

        address = build_address(CommandType.UPDATE, CommandAction.CASE, case_id)
        case = Case(
            title=title,
            type_id=type_id,
            priority_id=priority_id,
            estimate=estimate,
            milestone_id=milestone_id,
            refs=refs,
        )
        return self._send_post(address, single(Case), merge(case.to_json(), customs))

    def update_milestone(
        self,
        milestone_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        due_on: Optional[datetime] = None,
        is_completed: Optional[bool] = None
    ) -> RequestResult[Milestone]:
        """Update a milestone."""
        address = build_address(CommandType.UPDATE, CommandAction.MILESTONE, milestone_id)
        milestone = Milestone(
            name=name,
            description=description,
            due_on=due_on,
            is_completed=is_completed,
        )
        return self._send_post(address, single(Milestone), milestone.to_json())

    def update_plan(
        self,
        plan_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        milestone_id: Optional[int] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Plan]:
        """Update a test plan."""
        address = build_address(CommandType.UPDATE, CommandAction.PLAN, plan_id)
        plan = Plan(name=name, description=description, milestone_id=milestone_id)
        return self._send_post(address, single(Plan), merge(plan.to_json(), customs))

    def update_plan_entry(
        self,
        plan_id: int,
        entry_id: str,
        name: Optional[str] = None,
        assigned_to_id: Optional[int] = None,
        case_ids: Optional[List[int]] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[PlanEntry]:
        """Update the runs of a plan entry.

        Args:
            plan_id: Plan ID
            entry_id: Plan entry ID (a GUID string, not a run id)
            name: Run name
            assigned_to_id: User the runs are assigned to
            case_ids: Case IDs for a custom selection
            customs: ``custom_*`` fields

        Returns:
            The updated plan entry
        """
        address = build_address(
            CommandType.UPDATE, CommandAction.PLAN_ENTRY, plan_id, id2_text=entry_id
        )
        entry = PlanEntry(assignedto_id=assigned_to_id, name=name, case_ids=case_ids)
        return self._send_post(address, single(PlanEntry), merge(entry.to_json(), customs))

    def update_project(
        self,
        project_id: int,
        project_name: str,
        announcement: Optional[str] = None,
        show_announcement: Optional[bool] = None,
        is_completed: Optional[bool] = None
    ) -> RequestResult[Project]:
        """Update a project (admin only)."""
        address = build_address(CommandType.UPDATE, CommandAction.PROJECT, project_id)
        project = Project(
            name=project_name,
            announcement=announcement,
            show_announcement=show_announcement,
            is_completed=is_completed,
        )
        return self._send_post(address, single(Project), project.to_json())

    def update_run(
        self,
        run_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        milestone_id: Optional[int] = None,
        case_ids: Optional[Collection[int]] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Run]:
        """Update a test run.

        When ``case_ids`` is given and the existing run belongs to a project
        and suite, at least one id must be in that suite; the run is then
        switched to a custom case selection.
        """
        include_all = True
        existing = self.get_run(run_id).payload

        if (
            case_ids is not None
            and existing is not None
            and existing.project_id is not None
            and existing.suite_id is not None
        ):
            if not self._cases_found_in_suite(existing.project_id, existing.suite_id, case_ids):
                logger.info("Rejected update_run %s: none of %s in suite", run_id, sorted(case_ids))
                return RequestResult.bad_request(CASES_NOT_IN_SUITE)
            include_all = False

        address = build_address(CommandType.UPDATE, CommandAction.RUN, run_id)
        run = Run(
            name=name,
            description=description,
            milestone_id=milestone_id,
            include_all=include_all,
            case_ids=set(case_ids) if case_ids is not None else None,
        )
        return self._send_post(address, single(Run), merge(run.to_json(), customs))

    def update_section(
        self,
        section_id: int,
        name: str,
        description: Optional[str] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Section]:
        """Rename or describe a section."""
        if _is_blank(name):
            return self._reject("update_section", "name")

        address = build_address(CommandType.UPDATE, CommandAction.SECTION, section_id)
        section = Section(name=name, description=description)
        return self._send_post(address, single(Section), merge(section.to_json(), customs))

    def update_suite(
        self,
        suite_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        customs: Optional[Mapping[str, Any]] = None
    ) -> RequestResult[Suite]:
        """Update a test suite."""
        address = build_address(CommandType.UPDATE, CommandAction.SUITE, suite_id)
        suite = Suite(name=name, description=description)
        return self._send_post(address, single(Suite), merge(suite.to_json(), customs))

    # Close commands

    def close_plan(self, plan_id: int) -> RequestResult[Plan]:
        """Close a plan and archive its runs. Cannot be undone."""
        address = build_address(CommandType.CLOSE, CommandAction.PLAN, plan_id)
        return self._send_post(address, single(Plan))

    def close_run(self, run_id: int) -> RequestResult[Run]:
        """Close a run and archive its tests. Cannot be undone."""
        address = build_address(CommandType.CLOSE, CommandAction.RUN, run_id)
        return self._send_post(address, single(Run))

    # Delete commands

    def delete_milestone(self, milestone_id: int) -> RequestResult[Milestone]:
        address = build_address(CommandType.DELETE, CommandAction.MILESTONE, milestone_id)
        return self._send_post(address, single(Milestone))

    def delete_case(self, case_id: int) -> RequestResult[Case]:
        address = build_address(CommandType.DELETE, CommandAction.CASE, case_id)
        return self._send_post(address, single(Case))

    def delete_plan(self, plan_id: int) -> RequestResult[Plan]:
        address = build_address(CommandType.DELETE, CommandAction.PLAN, plan_id)
        return self._send_post(address, single(Plan))

    def delete_plan_entry(self, plan_id: int, entry_id: str) -> RequestResult[PlanEntry]:
        address = build_address(
            CommandType.DELETE, CommandAction.PLAN_ENTRY, plan_id, id2_text=entry_id
        )
        return self._send_post(address, single(PlanEntry))

    def delete_project(self, project_id: int) -> RequestResult[Project]:
        address = build_address(CommandType.DELETE, CommandAction.PROJECT, project_id)
        return self._send_post(address, single(Project))

    def delete_section(self, section_id: int) -> RequestResult[Section]:
        address = build_address(CommandType.DELETE, CommandAction.SECTION, section_id)
        return self._send_post(address, single(Section))

    def delete_suite(self, suite_id: int) -> RequestResult[Suite]:
        address = build_address(CommandType.DELETE, CommandAction.SUITE, suite_id)
        return self._send_post(address, single(Suite))

    def delete_run(self, run_id: int) -> RequestResult[Run]:
        address = build_address(CommandType.DELETE, CommandAction.RUN, run_id)
        return self._send_post(address, single(Run))

    # Get commands

    def get_test(self, test_id: int) -> RequestResult[Test]:
        address = build_address(CommandType.GET, CommandAction.TEST, test_id)
        return self._send_get(address, single(Test))

    def get_tests(self, run_id: int) -> RequestResult[List[Test]]:
        """All tests of a run."""
        address = build_address(CommandType.GET, CommandAction.TESTS, run_id)
        return self._send_bulk_get(address, CommandAction.TESTS, Test)

    def get_case(self, case_id: int) -> RequestResult[Case]:
        address = build_address(CommandType.GET, CommandAction.CASE, case_id)
        return self._send_get(address, single(Case))

    def get_cases(
        self,
        project_id: int,
        suite_id: int,
        section_id: Optional[int] = None
    ) -> RequestResult[List[Case]]:
        """Cases of a suite, optionally limited to one section."""
        options = f"&suite_id={suite_id}"
        if section_id is not None:
            options += f"&section_id={section_id}"
        address = build_address(CommandType.GET, CommandAction.CASES, project_id, options=options)
        return self._send_bulk_get(address, CommandAction.CASES, Case)

    def get_case_fields(self) -> RequestResult[List[CaseField]]:
        address = build_address(CommandType.GET, CommandAction.CASE_FIELDS)
        return self._send_get(address, many(CaseField))

    def get_case_types(self) -> RequestResult[List[CaseType]]:
        address = build_address(CommandType.GET, CommandAction.CASE_TYPES)
        return self._send_get(address, many(CaseType))

    def get_suite(self, suite_id: int) -> RequestResult[Suite]:
        address = build_address(CommandType.GET, CommandAction.SUITE, suite_id)
        return self._send_get(address, single(Suite))

    def get_suites(self, project_id: int) -> RequestResult[List[Suite]]:
        address = build_address(CommandType.GET, CommandAction.SUITES, project_id)
        return self._send_get(address, many(Suite))

    def get_section(self, section_id: int) -> RequestResult[Section]:
        address = build_address(CommandType.GET, CommandAction.SECTION, section_id)
        return self._send_get(address, single(Section))

    def get_sections(
        self,
        project_id: int,
        suite_id: Optional[int] = None
    ) -> RequestResult[List[Section]]:
        options = f"&suite_id={suite_id}" if suite_id is not None else None
        address = build_address(CommandType.GET, CommandAction.SECTIONS, project_id, options=options)
        return self._send_bulk_get(address, CommandAction.SECTIONS, Section)

    def get_run(self, run_id: int) -> RequestResult[Run]:
        address = build_address(CommandType.GET, CommandAction.RUN, run_id)
        return self._send_get(address, single(Run))

    def get_runs(self, project_id: int, offset: int = 0) -> RequestResult[List[Run]]:
        """Runs of a project, starting at ``offset``."""
        options = f"&offset={offset}" if offset > 0 else None
        address = build_address(CommandType.GET, CommandAction.RUNS, project_id, options=options)
        return self._send_bulk_get(address, CommandAction.RUNS, Run)

    def get_plan(self, plan_id: int) -> RequestResult[Plan]:
        address = build_address(CommandType.GET, CommandAction.PLAN, plan_id)
        return self._send_get(address, single(Plan))

    def get_plans(self, project_id: int) -> RequestResult[List[Plan]]:
        address = build_address(CommandType.GET, CommandAction.PLANS, project_id)
        return self._send_bulk_get(address, CommandAction.PLANS, Plan)

    def get_milestone(self, milestone_id: int) -> RequestResult[Milestone]:
        address = build_address(CommandType.GET, CommandAction.MILESTONE, milestone_id)
        return self._send_get(address, single(Milestone))

    def get_milestones(self, project_id: int) -> RequestResult[List[Milestone]]:
        address = build_address(CommandType.GET, CommandAction.MILESTONES, project_id)
        return self._send_bulk_get(address, CommandAction.MILESTONES, Milestone)

    def get_project(self, project_id: int) -> RequestResult[Project]:
        address = build_address(CommandType.GET, CommandAction.PROJECT, project_id)
        return self._send_get(address, single(Project))

    def get_projects(self) -> RequestResult[List[Project]]:
        """All projects of the instance (uncached; see ``projects``)."""
        address = build_address(CommandType.GET, CommandAction.PROJECTS)
        return self._send_bulk_get(address, CommandAction.PROJECTS, Project)

    def get_user(self, user_id: int) -> RequestResult[User]:
        address = build_address(CommandType.GET, CommandAction.USER, user_id)
        return self._send_get(address, single(User))

    def get_user_by_email(self, email: str) -> RequestResult[User]:
        """Find a user by email address."""
        if _is_blank(email):
            return self._reject("get_user_by_email", "email")

        # "+" and other reserved characters must not reach the query raw
        options = f"&email={quote(email, safe='@')}"
        address = build_address(CommandType.GET, CommandAction.USER_BY_EMAIL, options=options)
        return self._send_get(address, single(User))

    def get_users(self) -> RequestResult[List[User]]:
        address = build_address(CommandType.GET, CommandAction.USERS)
        return self._send_get(address, many(User))

    def get_results(
        self,
        test_id: int,
        limit: Optional[int] = None,
        status_ids: Optional[Collection[ResultStatus]] = None
    ) -> RequestResult[List[Result]]:
        """Results of a test, latest first."""
        options = _status_filter(status_ids, limit)
        address = build_address(CommandType.GET, CommandAction.RESULTS, test_id, options=options)
        return self._send_bulk_get(address, CommandAction.RESULTS, Result)

    def get_results_for_case(
        self,
        run_id: int,
        case_id: int,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status_ids: Optional[Collection[ResultStatus]] = None
    ) -> RequestResult[List[Result]]:
        """Results for one case within a run."""
        options = _status_filter(status_ids, limit, offset)
        address = build_address(
            CommandType.GET, CommandAction.RESULTS_FOR_CASE, run_id, case_id, options=options
        )
        return self._send_bulk_get(address, CommandAction.RESULTS, Result)

    def get_results_for_run(
        self,
        run_id: int,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status_ids: Optional[Collection[ResultStatus]] = None
    ) -> RequestResult[List[Result]]:
        """Results of every test in a run."""
        options = _status_filter(status_ids, limit, offset)
        address = build_address(
            CommandType.GET, CommandAction.RESULTS_FOR_RUN, run_id, options=options
        )
        return self._send_bulk_get(address, CommandAction.RESULTS, Result)

    def get_statuses(self) -> RequestResult[List[Status]]:
        address = build_address(CommandType.GET, CommandAction.STATUSES)
        return self._send_get(address, many(Status))

    def get_priorities(self) -> RequestResult[List[Priority]]:
        """All priorities (uncached; see ``priority_levels``)."""
        address = build_address(CommandType.GET, CommandAction.PRIORITIES)
        return self._send_get(address, many(Priority))

    def get_configuration_groups(self, project_id: int) -> RequestResult[List[ConfigurationGroup]]:
        address = build_address(CommandType.GET, CommandAction.CONFIGS, project_id)
        return self._send_get(address, many(ConfigurationGroup))

    # Helpers

    def _send_post(self, address, decode, json_body: Optional[Dict[str, Any]] = None) -> RequestResult:
        return self._dispatcher.dispatch(address, RequestType.POST, decode, json_body)

    def _send_get(self, address, decode) -> RequestResult:
        return self._dispatcher.dispatch(address, RequestType.GET, decode)

    def _send_bulk_get(self, address, action: CommandAction, entity_type) -> RequestResult:
        return self._dispatcher.fetch_all_pages(address, action.value, entity_type)

    def _reject(self, operation: str, field_name: str) -> RequestResult:
        """BAD_REQUEST result for a blank required field; nothing is sent."""
        logger.info("Rejected %s: '%s' must not be blank", operation, field_name)
        return RequestResult.bad_request(f"'{field_name}' must not be blank")

    def _cases_found_in_suite(
        self,
        project_id: int,
        suite_id: int,
        case_ids: Collection[int]
    ) -> bool:
        """True if at least one of ``case_ids`` exists in the suite."""
        result = self.get_cases(project_id, suite_id)
        if not result.is_success:
            return False
        wanted = set(case_ids)
        return any(c is not None and c.id in wanted for c in result.payload)
