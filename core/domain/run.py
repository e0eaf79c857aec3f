"""
Execution entities: runs, tests, results and statuses.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Set

from core.interfaces.entity import IJsonEntity
from .json_fields import (
    compact,
    custom_fields,
    id_list,
    merge,
    require_object,
    to_datetime,
)


@dataclass
class Run(IJsonEntity):
    """A test run."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    suite_id: Optional[int] = None
    project_id: Optional[int] = None
    plan_id: Optional[int] = None
    milestone_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[Set[int]] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
    created_by: Optional[int] = None
    passed_count: Optional[int] = None
    failed_count: Optional[int] = None
    blocked_count: Optional[int] = None
    untested_count: Optional[int] = None
    retest_count: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Run':
        data = require_object(data, cls.__name__)
        case_ids = data.get('case_ids')
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            suite_id=data.get('suite_id'),
            project_id=data.get('project_id'),
            plan_id=data.get('plan_id'),
            milestone_id=data.get('milestone_id'),
            assignedto_id=data.get('assignedto_id'),
            include_all=data.get('include_all'),
            case_ids=set(case_ids) if case_ids is not None else None,
            is_completed=data.get('is_completed'),
            completed_on=to_datetime(data.get('completed_on')),
            created_on=to_datetime(data.get('created_on')),
            created_by=data.get('created_by'),
            passed_count=data.get('passed_count'),
            failed_count=data.get('failed_count'),
            blocked_count=data.get('blocked_count'),
            untested_count=data.get('untested_count'),
            retest_count=data.get('retest_count'),
            url=data.get('url'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'suite_id': self.suite_id,
            'name': self.name,
            'description': self.description,
            'milestone_id': self.milestone_id,
            'assignedto_id': self.assignedto_id,
            'include_all': self.include_all,
            'case_ids': id_list(self.case_ids),
        })


@dataclass
class Test(IJsonEntity):
    """A test: one case instantiated inside a run."""
    __test__ = False  # not a pytest test class

    id: Optional[int] = None
    case_id: Optional[int] = None
    run_id: Optional[int] = None
    status_id: Optional[int] = None
    title: Optional[str] = None
    assignedto_id: Optional[int] = None
    priority_id: Optional[int] = None
    type_id: Optional[int] = None
    milestone_id: Optional[int] = None
    refs: Optional[str] = None
    estimate: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Test':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            case_id=data.get('case_id'),
            run_id=data.get('run_id'),
            status_id=data.get('status_id'),
            title=data.get('title'),
            assignedto_id=data.get('assignedto_id'),
            priority_id=data.get('priority_id'),
            type_id=data.get('type_id'),
            milestone_id=data.get('milestone_id'),
            refs=data.get('refs'),
            estimate=data.get('estimate'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'case_id': self.case_id,
            'status_id': self.status_id,
            'assignedto_id': self.assignedto_id,
        })


@dataclass
class Result(IJsonEntity):
    """A result recorded against a test (or a case within a run)."""
    id: Optional[int] = None
    test_id: Optional[int] = None
    case_id: Optional[int] = None
    status_id: Optional[int] = None
    comment: Optional[str] = None
    version: Optional[str] = None
    elapsed: Optional[str] = None
    defects: Optional[str] = None
    assignedto_id: Optional[int] = None
    created_on: Optional[datetime] = None
    created_by: Optional[int] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Result':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            test_id=data.get('test_id'),
            case_id=data.get('case_id'),
            status_id=data.get('status_id'),
            comment=data.get('comment'),
            version=data.get('version'),
            elapsed=data.get('elapsed'),
            defects=data.get('defects'),
            assignedto_id=data.get('assignedto_id'),
            created_on=to_datetime(data.get('created_on')),
            created_by=data.get('created_by'),
            custom_fields=custom_fields(data),
        )

    def to_json(self) -> Dict[str, Any]:
        body = compact({
            'test_id': self.test_id,
            'case_id': self.case_id,
            'status_id': int(self.status_id) if self.status_id is not None else None,
            'comment': self.comment,
            'version': self.version,
            'elapsed': self.elapsed,
            'defects': self.defects,
            'assignedto_id': self.assignedto_id,
        })
        return merge(body, self.custom_fields)


@dataclass
class BulkResults:
    """Request body for submitting several results in one call."""
    results: List[Result] = field(default_factory=list)

    def add(self, result: Result) -> None:
        self.results.append(result)

    def to_json(self) -> Dict[str, Any]:
        return {'results': [r.to_json() for r in self.results]}


@dataclass
class Status(IJsonEntity):
    """A result status (system or custom)."""
    id: Optional[int] = None
    name: Optional[str] = None
    label: Optional[str] = None
    color_dark: Optional[int] = None
    color_medium: Optional[int] = None
    color_bright: Optional[int] = None
    is_system: Optional[bool] = None
    is_untested: Optional[bool] = None
    is_final: Optional[bool] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Status':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            label=data.get('label'),
            color_dark=data.get('color_dark'),
            color_medium=data.get('color_medium'),
            color_bright=data.get('color_bright'),
            is_system=data.get('is_system'),
            is_untested=data.get('is_untested'),
            is_final=data.get('is_final'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name, 'label': self.label})
