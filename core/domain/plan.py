"""
Test plan entities.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from core.interfaces.entity import IJsonEntity
from .json_fields import compact, id_list, require_object, to_datetime
from .run import Run


@dataclass
class PlanEntry(IJsonEntity):
    """A group of runs inside a plan. Entry ids are strings (GUIDs)."""
    id: Optional[str] = None
    suite_id: Optional[int] = None
    name: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[List[int]] = None
    runs: List[Run] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'PlanEntry':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            suite_id=data.get('suite_id'),
            name=data.get('name'),
            assignedto_id=data.get('assignedto_id'),
            include_all=data.get('include_all'),
            case_ids=data.get('case_ids'),
            runs=[Run.from_json(r) for r in data.get('runs') or []],
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'suite_id': self.suite_id,
            'name': self.name,
            'assignedto_id': self.assignedto_id,
            'include_all': self.include_all,
            'case_ids': id_list(self.case_ids),
        })


@dataclass
class Plan(IJsonEntity):
    """A test plan."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    milestone_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
    created_by: Optional[int] = None
    passed_count: Optional[int] = None
    failed_count: Optional[int] = None
    url: Optional[str] = None
    entries: Optional[List[PlanEntry]] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Plan':
        data = require_object(data, cls.__name__)
        entries = data.get('entries')
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            project_id=data.get('project_id'),
            milestone_id=data.get('milestone_id'),
            assignedto_id=data.get('assignedto_id'),
            is_completed=data.get('is_completed'),
            completed_on=to_datetime(data.get('completed_on')),
            created_on=to_datetime(data.get('created_on')),
            created_by=data.get('created_by'),
            passed_count=data.get('passed_count'),
            failed_count=data.get('failed_count'),
            url=data.get('url'),
            entries=[PlanEntry.from_json(e) for e in entries] if entries is not None else None,
        )

    def to_json(self) -> Dict[str, Any]:
        entries = None
        if self.entries is not None:
            entries = [e.to_json() for e in self.entries]
        return compact({
            'name': self.name,
            'description': self.description,
            'milestone_id': self.milestone_id,
            'entries': entries,
        })
