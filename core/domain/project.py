"""
Project structure entities: projects, suites, sections and milestones.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from core.interfaces.entity import IJsonEntity
from .json_fields import compact, from_datetime, require_object, to_datetime


@dataclass
class Project(IJsonEntity):
    """A TestRail project."""
    id: Optional[int] = None
    name: Optional[str] = None
    announcement: Optional[str] = None
    show_announcement: Optional[bool] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[datetime] = None
    suite_mode: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Project':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            announcement=data.get('announcement'),
            show_announcement=data.get('show_announcement'),
            is_completed=data.get('is_completed'),
            completed_on=to_datetime(data.get('completed_on')),
            suite_mode=data.get('suite_mode'),
            url=data.get('url'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'name': self.name,
            'announcement': self.announcement,
            'show_announcement': self.show_announcement,
            'is_completed': self.is_completed,
            'suite_mode': self.suite_mode,
        })


@dataclass
class Suite(IJsonEntity):
    """A test suite within a project."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    is_master: Optional[bool] = None
    is_baseline: Optional[bool] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[datetime] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Suite':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            project_id=data.get('project_id'),
            is_master=data.get('is_master'),
            is_baseline=data.get('is_baseline'),
            is_completed=data.get('is_completed'),
            completed_on=to_datetime(data.get('completed_on')),
            url=data.get('url'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name, 'description': self.description})


@dataclass
class Section(IJsonEntity):
    """A section (folder) grouping test cases."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    suite_id: Optional[int] = None
    parent_id: Optional[int] = None
    depth: Optional[int] = None
    display_order: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Section':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            suite_id=data.get('suite_id'),
            parent_id=data.get('parent_id'),
            depth=data.get('depth'),
            display_order=data.get('display_order'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'name': self.name,
            'description': self.description,
            'suite_id': self.suite_id,
            'parent_id': self.parent_id,
        })


@dataclass
class Milestone(IJsonEntity):
    """A milestone, optionally nested under a parent milestone."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    parent_id: Optional[int] = None
    due_on: Optional[datetime] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[datetime] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Milestone':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            project_id=data.get('project_id'),
            parent_id=data.get('parent_id'),
            due_on=to_datetime(data.get('due_on')),
            is_completed=data.get('is_completed'),
            completed_on=to_datetime(data.get('completed_on')),
            url=data.get('url'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({
            'name': self.name,
            'description': self.description,
            'parent_id': self.parent_id,
            'due_on': from_datetime(self.due_on),
            'is_completed': self.is_completed,
        })
