"""
Test case entities and case metadata (fields, types, priorities).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from core.interfaces.entity import IJsonEntity
from .json_fields import compact, custom_fields, merge, require_object, to_datetime


@dataclass
class Case(IJsonEntity):
    """A test case. Custom fields are kept verbatim in ``custom_fields``."""
    id: Optional[int] = None
    title: Optional[str] = None
    section_id: Optional[int] = None
    suite_id: Optional[int] = None
    template_id: Optional[int] = None
    type_id: Optional[int] = None
    priority_id: Optional[int] = None
    milestone_id: Optional[int] = None
    refs: Optional[str] = None
    estimate: Optional[str] = None
    estimate_forecast: Optional[str] = None
    created_by: Optional[int] = None
    created_on: Optional[datetime] = None
    updated_by: Optional[int] = None
    updated_on: Optional[datetime] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Case':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            title=data.get('title'),
            section_id=data.get('section_id'),
            suite_id=data.get('suite_id'),
            template_id=data.get('template_id'),
            type_id=data.get('type_id'),
            priority_id=data.get('priority_id'),
            milestone_id=data.get('milestone_id'),
            refs=data.get('refs'),
            estimate=data.get('estimate'),
            estimate_forecast=data.get('estimate_forecast'),
            created_by=data.get('created_by'),
            created_on=to_datetime(data.get('created_on')),
            updated_by=data.get('updated_by'),
            updated_on=to_datetime(data.get('updated_on')),
            custom_fields=custom_fields(data),
        )

    def to_json(self) -> Dict[str, Any]:
        body = compact({
            'title': self.title,
            'template_id': self.template_id,
            'type_id': self.type_id,
            'priority_id': self.priority_id,
            'milestone_id': self.milestone_id,
            'refs': self.refs,
            'estimate': self.estimate,
        })
        return merge(body, self.custom_fields)


@dataclass
class CaseField(IJsonEntity):
    """Definition of a (custom) case field."""
    id: Optional[int] = None
    name: Optional[str] = None
    system_name: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    type_id: Optional[int] = None
    display_order: Optional[int] = None
    configs: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'CaseField':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            system_name=data.get('system_name'),
            label=data.get('label'),
            description=data.get('description'),
            type_id=data.get('type_id'),
            display_order=data.get('display_order'),
            configs=list(data.get('configs') or []),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'name': self.name,
            'label': self.label,
            'description': self.description,
            'type_id': self.type_id,
        })


@dataclass
class CaseType(IJsonEntity):
    """A case type such as "Automated" or "Functionality"."""
    id: Optional[int] = None
    name: Optional[str] = None
    is_default: Optional[bool] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'CaseType':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            is_default=data.get('is_default'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name, 'is_default': self.is_default})


@dataclass
class Priority(IJsonEntity):
    """A case priority; ``priority_level`` is higher for more severe."""
    id: int
    priority_level: int
    name: Optional[str] = None
    short_name: Optional[str] = None
    is_default: Optional[bool] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Priority':
        data = require_object(data, cls.__name__)
        return cls(
            id=int(data['id']),
            priority_level=int(data['priority']),
            name=data.get('name'),
            short_name=data.get('short_name'),
            is_default=data.get('is_default'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'id': self.id,
            'priority': self.priority_level,
            'name': self.name,
            'short_name': self.short_name,
            'is_default': self.is_default,
        })
