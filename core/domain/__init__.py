"""
Domain entities and value objects.
"""
from .enums import CommandAction, CommandType, RequestType, ResultStatus
from .result import RequestResult
from .bulk import BulkPage
from .project import Project, Suite, Section, Milestone
from .case import Case, CaseField, CaseType, Priority
from .run import Run, Test, Result, BulkResults, Status
from .plan import Plan, PlanEntry
from .user import User, Configuration, ConfigurationGroup

__all__ = [
    # Commands
    'CommandAction',
    'CommandType',
    'RequestType',
    'ResultStatus',
    # Envelopes
    'RequestResult',
    'BulkPage',
    # Entities
    'Project',
    'Suite',
    'Section',
    'Milestone',
    'Case',
    'CaseField',
    'CaseType',
    'Priority',
    'Run',
    'Test',
    'Result',
    'BulkResults',
    'Status',
    'Plan',
    'PlanEntry',
    'User',
    'Configuration',
    'ConfigurationGroup',
]
