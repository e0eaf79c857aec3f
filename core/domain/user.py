"""
User and configuration entities.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.interfaces.entity import IJsonEntity
from .json_fields import compact, require_object


@dataclass
class User(IJsonEntity):
    """A TestRail user."""
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'User':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            email=data.get('email'),
            is_active=data.get('is_active'),
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name, 'email': self.email, 'is_active': self.is_active})


@dataclass
class Configuration(IJsonEntity):
    """One configuration value, e.g. "Chrome" in group "Browsers"."""
    id: Optional[int] = None
    name: Optional[str] = None
    group_id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Configuration':
        data = require_object(data, cls.__name__)
        return cls(id=data.get('id'), name=data.get('name'), group_id=data.get('group_id'))

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name})


@dataclass
class ConfigurationGroup(IJsonEntity):
    """A named group of configurations within a project."""
    id: Optional[int] = None
    name: Optional[str] = None
    project_id: Optional[int] = None
    configs: List[Configuration] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'ConfigurationGroup':
        data = require_object(data, cls.__name__)
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            project_id=data.get('project_id'),
            configs=[Configuration.from_json(c) for c in data.get('configs') or []],
        )

    def to_json(self) -> Dict[str, Any]:
        return compact({'name': self.name})
