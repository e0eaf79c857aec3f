"""
TestRail command enums.

Command types and actions combine into the endpoint name, e.g.
``CommandType.GET`` + ``CommandAction.CASE`` -> ``get_case``.
"""
from enum import Enum, IntEnum


class CommandType(str, Enum):
    """Kind of operation the server performs."""
    GET = "get"
    ADD = "add"
    UPDATE = "update"
    CLOSE = "close"
    DELETE = "delete"


class CommandAction(str, Enum):
    """Resource the command acts on."""
    CASE = "case"
    CASES = "cases"
    CASE_FIELDS = "case_fields"
    CASE_TYPES = "case_types"
    CONFIGS = "configs"
    MILESTONE = "milestone"
    MILESTONES = "milestones"
    PLAN = "plan"
    PLANS = "plans"
    PLAN_ENTRY = "plan_entry"
    PRIORITIES = "priorities"
    PROJECT = "project"
    PROJECTS = "projects"
    RESULT = "result"
    RESULTS = "results"
    RESULT_FOR_CASE = "result_for_case"
    RESULTS_FOR_CASE = "results_for_case"
    RESULTS_FOR_CASES = "results_for_cases"
    RESULTS_FOR_RUN = "results_for_run"
    RUN = "run"
    RUNS = "runs"
    SECTION = "section"
    SECTIONS = "sections"
    STATUSES = "statuses"
    SUITE = "suite"
    SUITES = "suites"
    TEST = "test"
    TESTS = "tests"
    USER = "user"
    USER_BY_EMAIL = "user_by_email"
    USERS = "users"


class RequestType(str, Enum):
    """HTTP method used for a command."""
    GET = "GET"
    POST = "POST"


class ResultStatus(IntEnum):
    """Built-in TestRail result statuses."""
    PASSED = 1
    BLOCKED = 2
    UNTESTED = 3
    RETEST = 4
    FAILED = 5
