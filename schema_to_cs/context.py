"""
Schema context descriptors.

These nodes describe the resolved schema handed to the generator: classes,
interfaces and enums with their properties. Naming conventions of the schema
language (capitalized user types, the ``Enum`` suffix, numeric member values)
are interpreted once, when a descriptor is constructed, so the renderers only
ever look at explicit flags.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import MalformedEnumMemberError, SchemaLoadError
from .utils import is_user_defined_name, parse_number

# Enums with this suffix are closed integer enumerations, others are constant structs
ENUM_SUFFIX = "Enum"


class DescriptorKind(str, Enum):
    """Kind of schema descriptor."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"


class MemberValueKind(str, Enum):
    """How an enum member got its value."""

    INTEGER = "int"  # Explicit integral number
    FLOAT = "float"  # Explicit fractional number
    TEXT = "string"  # Explicit symbolic value
    POSITIONAL = "positional"  # No value declared, ordinal position is used


@dataclass(frozen=True)
class MemberValue:
    """The value of an enum member."""

    kind: MemberValueKind
    value: int | float | str

    @property
    def data_type(self) -> str:
        """C# type of a constant holding this value."""
        if self.kind == MemberValueKind.POSITIONAL:
            return "int"
        return self.kind.value

    @property
    def literal(self) -> str:
        """C# literal for this value."""
        if self.kind == MemberValueKind.TEXT:
            escaped = str(self.value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if self.kind == MemberValueKind.FLOAT:
            return f"{self.value!r}f"
        return str(self.value)

    @staticmethod
    def from_declared(declared: Any, position: int, entity: str = "", member_name: str = "") -> MemberValue:
        """
        Classify a member's declared value.

        Args:
            declared: Declared value (text, number, or None)
            position: Zero-based position of the member in its enum
            entity: Enum name, for error messages
            member_name: Member name, for error messages

        Returns:
            The classified member value
        """
        if declared is None or (isinstance(declared, str) and not declared.strip()):
            return MemberValue(MemberValueKind.POSITIONAL, position)

        if isinstance(declared, bool):
            raise MalformedEnumMemberError(entity, member_name, declared)

        if isinstance(declared, str):
            number = parse_number(declared)
            if number is None:
                return MemberValue(MemberValueKind.TEXT, declared)
        elif isinstance(declared, (int, float)):
            number = declared
            if isinstance(number, float):
                if not math.isfinite(number):
                    raise MalformedEnumMemberError(entity, member_name, declared)
                if number.is_integer():
                    number = int(number)
        else:
            raise MalformedEnumMemberError(entity, member_name, declared)

        if isinstance(number, int):
            return MemberValue(MemberValueKind.INTEGER, number)
        return MemberValue(MemberValueKind.FLOAT, number)


@dataclass
class Property:
    """A typed property of a class or interface."""

    name: str = ""
    type: str = ""  # Primitive name, "ref", "array", or a container kind such as "map"
    index: int = 0  # Wire position, unique within the owner
    child_type: str | None = None  # Referenced structure or element type
    enum_type: str | None = None  # Enum governing the value domain
    deprecated: bool = False

    # Whether child_type names a user-defined structure (None = derive from name)
    child_is_user_defined: bool | None = None

    def __post_init__(self):
        if self.child_is_user_defined is None:
            self.child_is_user_defined = is_user_defined_name(self.child_type)

    @property
    def is_container(self) -> bool:
        return self.child_type is not None and self.type != "ref"

    @staticmethod
    def from_dict(d: dict, owner: str = "") -> Property:
        """Create a property from its JSON representation."""
        _require_name(d, f"property of {owner}" if owner else "property")
        where = f"{owner}.{d['name']}" if owner else d["name"]
        return Property(
            name=d["name"],
            type=_get_text(d, where, "type") or "",
            index=d.get("index", 0),
            child_type=_get_text(d, where, "childType", "child_type"),
            enum_type=_get_text(d, where, "enumType", "enum_type"),
            deprecated=bool(d.get("deprecated", False)),
            child_is_user_defined=_get(d, "isUserDefined", "child_is_user_defined"),
        )


@dataclass
class ClassDef:
    """A schema class, rendered as a Colyseus.Schema type."""

    name: str = ""
    extends: str = "Schema"
    properties: list[Property] = field(default_factory=list)

    kind = DescriptorKind.CLASS

    @staticmethod
    def from_dict(d: dict) -> ClassDef:
        _require_name(d, "class")
        return ClassDef(
            name=d["name"],
            extends=d.get("extends") or "Schema",
            properties=[Property.from_dict(p, d["name"]) for p in _get_list(d, "properties", d["name"])],
        )


@dataclass
class InterfaceDef:
    """A schema interface, rendered as a plain serializable DTO."""

    name: str = ""
    properties: list[Property] = field(default_factory=list)

    kind = DescriptorKind.INTERFACE

    @staticmethod
    def from_dict(d: dict) -> InterfaceDef:
        _require_name(d, "interface")
        return InterfaceDef(
            name=d["name"],
            properties=[Property.from_dict(p, d["name"]) for p in _get_list(d, "properties", d["name"])],
        )


@dataclass
class EnumMember:
    """A member of a schema enum."""

    name: str = ""
    type: Any = None  # Declared value as written in the schema
    value: MemberValue | None = None  # Classified value (None = derive from type)


@dataclass
class EnumDef:
    """A schema enum, rendered as an integer enum or a constant struct."""

    name: str = ""
    members: list[EnumMember] = field(default_factory=list)

    # Whether to render a closed enumeration (None = derive from the name suffix)
    is_enumeration: bool | None = None

    kind = DescriptorKind.ENUM

    def __post_init__(self):
        if self.is_enumeration is None:
            self.is_enumeration = self.name.endswith(ENUM_SUFFIX)
        # Reject malformed members early, values are classified again at render time
        self.member_values()

    def member_values(self) -> list[MemberValue]:
        """Values of the members, positional ones numbered by their place in this enum."""
        return [member.value or MemberValue.from_declared(member.type, position, self.name, member.name) for position, member in enumerate(self.members)]

    @staticmethod
    def from_dict(d: dict) -> EnumDef:
        _require_name(d, "enum")
        key = "members" if "members" in d else "properties"
        members = _get_list(d, key, d["name"])
        for m in members:
            _require_name(m, f"member of enum {d['name']}")
        return EnumDef(
            name=d["name"],
            members=[EnumMember(name=m["name"], type=m.get("type")) for m in members],
            is_enumeration=_get(d, "isEnumeration", "is_enumeration"),
        )


@dataclass
class Context:
    """The resolved schema universe passed to the generator."""

    classes: list[ClassDef] = field(default_factory=list)
    interfaces: list[InterfaceDef] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)

    def descriptors(self) -> Iterator[ClassDef | InterfaceDef | EnumDef]:
        """Yield all descriptors: classes, then interfaces, then enums."""
        yield from self.classes
        yield from self.interfaces
        yield from self.enums

    @staticmethod
    def from_dict(d: dict) -> Context:
        """Create a context from its JSON representation."""
        if not isinstance(d, dict):
            raise SchemaLoadError(f"Context must be a JSON object, got {type(d).__name__}")
        return Context(
            classes=[ClassDef.from_dict(c) for c in _get_list(d, "classes", "context")],
            interfaces=[InterfaceDef.from_dict(i) for i in _get_list(d, "interfaces", "context")],
            enums=[EnumDef.from_dict(e) for e in _get_list(d, "enums", "context")],
        )


def _get(d: dict, camel: str, snake: str) -> Any:
    return d.get(camel, d.get(snake))


def _get_text(d: dict, where: str, *keys: str) -> str | None:
    value = next((d[k] for k in keys if k in d), None)
    if value is not None and not isinstance(value, str):
        raise SchemaLoadError(f"{where}: '{keys[0]}' must be a string, got {type(value).__name__} {value!r}")
    return value


def _get_list(d: dict, key: str, where: str) -> list:
    value = d.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaLoadError(f"{where}: '{key}' must be a list, got {type(value).__name__}")
    return value


def _require_name(d: Any, what: str) -> None:
    if not isinstance(d, dict) or not isinstance(d.get("name"), str) or not d["name"]:
        raise SchemaLoadError(f"Every {what} needs a name, got {d!r}")
