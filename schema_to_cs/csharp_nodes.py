"""
C# AST node definitions.

These nodes represent the members of the generated C# types (fields,
constructors, enum members and constants). The file-level layout around them
is produced by the Jinja2 templates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AccessModifier(str, Enum):
    """C# access modifiers."""

    PUBLIC = "public"


class MemberModifier(str, Enum):
    """C# member modifiers."""

    CONST = "const"


@dataclass
class CSharpNode:
    """Base class for all C# AST nodes."""

    pass


@dataclass
class CSharpAttribute(CSharpNode):
    """Represents a C# attribute (e.g., [Type(0, "int32")])."""

    name: str = ""
    arguments: list[str] = field(default_factory=list)

    def to_string(self) -> str:
        """Convert to attribute string."""
        if self.arguments:
            args_str = ", ".join(self.arguments)
            return f"[{self.name}({args_str})]"
        return f"[{self.name}]"


@dataclass
class CSharpField(CSharpNode):
    """Represents a class field or constant."""

    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    default_value: str | None = None
    attributes: list[CSharpAttribute] = field(default_factory=list)


@dataclass
class CSharpConstructor(CSharpNode):
    """Represents an empty parameterless constructor."""

    class_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    attributes: list[CSharpAttribute] = field(default_factory=list)


@dataclass
class CSharpEnumMember(CSharpNode):
    """Represents an enum member."""

    name: str = ""
    value: str | None = None


class CSharpSerializer:
    """Serializes C# member nodes to source lines."""

    def serialize_field(self, node: CSharpField, prefix: str = "") -> list[str]:
        """Serialize a field declaration, attributes first."""
        lines = [f"{prefix}{attr.to_string()}" for attr in node.attributes]

        modifiers = " ".join(m.value for m in node.modifiers)
        if modifiers:
            modifiers = f" {modifiers}"

        declaration = f"{prefix}{node.access.value}{modifiers} {node.type_name} {node.name}"
        if node.default_value is not None:
            declaration += f" = {node.default_value}"
        lines.append(declaration + ";")

        return lines

    def serialize_constructor(self, node: CSharpConstructor, prefix: str = "") -> list[str]:
        """Serialize an empty constructor on a single line."""
        lines = [f"{prefix}{attr.to_string()}" for attr in node.attributes]
        lines.append(f"{prefix}{node.access.value} {node.class_name}() {{ }}")
        return lines

    def serialize_enum_member(self, node: CSharpEnumMember, prefix: str = "") -> str:
        """Serialize an enum member; every member keeps its trailing comma."""
        if node.value is not None:
            return f"{prefix}{node.name} = {node.value},"
        return f"{prefix}{node.name},"
