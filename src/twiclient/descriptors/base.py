"""
Descriptor base model.

A descriptor is one request against the REST API. Fields are declared with
``query("Name")`` (sent as a query/body parameter), ``path(PathRole.SID)``
(a URL segment) or plain pydantic defaults (flags read by suffix rules).
The ``resource`` and ``subresource`` segments are class variables.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

QueryValue = Union[str, tuple[str, ...]]

_QUERY_KEY = "query"
_PATH_KEY = "path"


class PathRole(str, Enum):
    RESOURCE = "resource"
    SID = "Sid"
    SUBRESOURCE = "subresource"
    CALL_SID = "CallSid"


# URL segments are always resolved in this order.
PATH_ORDER = (PathRole.RESOURCE, PathRole.SID, PathRole.SUBRESOURCE, PathRole.CALL_SID)


def query(name: str, *, repeated: bool = False) -> Any:
    """Declare a query/body parameter emitted as ``name=value``."""
    if repeated:
        return Field(default=(), json_schema_extra={_QUERY_KEY: name})
    return Field(default="", json_schema_extra={_QUERY_KEY: name})


def path(role: PathRole) -> Any:
    """Declare a field whose value is a URL path segment."""
    if role not in (PathRole.SID, PathRole.CALL_SID):
        raise ValueError(f"{role.value} is a class-level segment, not a field")
    return Field(default="", json_schema_extra={_PATH_KEY: role.value})


def _extra(field_info: Any) -> dict[str, Any]:
    extra = field_info.json_schema_extra
    return extra if isinstance(extra, dict) else {}


class Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    resource: ClassVar[Optional[str]] = None
    subresource: ClassVar[Optional[str]] = None

    path_attrs: ClassVar[dict[PathRole, str]] = {}
    query_attrs: ClassVar[tuple[tuple[str, str], ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        path_fields: dict[PathRole, str] = {}
        query_fields: list[tuple[str, str]] = []
        for attr, info in cls.model_fields.items():
            extra = _extra(info)
            if _QUERY_KEY in extra and _PATH_KEY in extra:
                raise TypeError(f"{cls.__name__}.{attr} is both a query parameter and a path segment")
            if _QUERY_KEY in extra:
                if not extra[_QUERY_KEY]:
                    raise TypeError(f"{cls.__name__}.{attr} has an empty query name")
                query_fields.append((attr, extra[_QUERY_KEY]))
            elif _PATH_KEY in extra:
                role = PathRole(extra[_PATH_KEY])
                if role in path_fields:
                    raise TypeError(f"{cls.__name__} declares path role {role.value} twice")
                path_fields[role] = attr
        cls.path_attrs = path_fields
        cls.query_attrs = tuple(query_fields)

    def path_roles(self) -> dict[PathRole, str]:
        """Declared path roles, in URL order.

        ``resource`` and ``subresource`` map to their literal segment, ``Sid``
        and ``CallSid`` to the field value.
        """
        roles: dict[PathRole, str] = {}
        for role in PATH_ORDER:
            if role is PathRole.RESOURCE and self.resource is not None:
                roles[role] = self.resource
            elif role is PathRole.SUBRESOURCE and self.subresource is not None:
                roles[role] = self.subresource
            elif role in self.path_attrs:
                roles[role] = getattr(self, self.path_attrs[role])
        return roles

    def query_fields(self) -> list[tuple[str, QueryValue]]:
        """(parameter name, value) pairs in field declaration order."""
        return [(name, getattr(self, attr)) for attr, name in self.query_attrs]
