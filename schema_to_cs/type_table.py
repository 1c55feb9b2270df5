"""
Type table and type resolution.

Maps schema type names to C# type names and computes the C# type of every
property. A table is built per generation run so enum names registered for one
schema never leak into another.
"""

from __future__ import annotations

from collections.abc import Iterable

from .context import Property
from .errors import SchemaTypeError
from .utils import capitalize

# Suffix of the Colyseus.Schema container classes (ArraySchema, MapSchema, ...)
CONTAINER_SUFFIX = "Schema"


class TypeTable:
    """Mapping from schema type names to C# type names."""

    PRIMITIVE_TYPES = {
        "string": "string",
        "number": "float",
        "boolean": "bool",
        "int8": "sbyte",
        "uint8": "byte",
        "int16": "short",
        "uint16": "ushort",
        "int32": "int",
        "uint32": "uint",
        "int64": "long",
        "uint64": "ulong",
        "float32": "float",
        "float64": "double",
    }

    def __init__(self, enum_names: Iterable[str] = ()):
        self._types = dict(self.PRIMITIVE_TYPES)
        for name in enum_names:
            self.add_enum(name)

    def add_enum(self, name: str) -> None:
        """Register an enum name; enums map to themselves."""
        self._types[name] = name

    def lookup(self, name: str | None) -> str | None:
        """Return the C# type for a schema type name, or None if unknown."""
        if name is None:
            return None
        return self._types.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


class TypeResolver:
    """Resolves the C# type expression of a property."""

    def __init__(self, table: TypeTable):
        """
        Initialize the resolver.

        Args:
            table: Type table of the current generation run
        """
        self.table = table

    def resolve(self, prop: Property, owner: str = "") -> str:
        """
        Resolve the C# type of a schema-tracked field.

        Args:
            prop: The property
            owner: Name of the descriptor owning the property, for error messages

        Returns:
            C# type string (e.g., "int", "ArraySchema<Item>", "string[]")
        """
        if prop.enum_type:
            return prop.enum_type

        if prop.child_type is not None:
            child = self._resolve_child(prop, owner)
            if prop.type == "ref":
                return child
            container = capitalize(prop.type) + CONTAINER_SUFFIX
            return f"{container}<{child}>"

        if prop.type == "array":
            return f"{self._resolve_element(prop, owner)}[]"

        return self._lookup(prop.type, prop, owner)

    def resolve_for_interface(self, prop: Property, owner: str = "") -> str:
        """
        Resolve the C# type of a DTO field.

        DTOs carry plain arrays instead of Colyseus.Schema containers.
        """
        if not prop.enum_type and prop.is_container:
            return f"{self._resolve_element(prop, owner)}[]"
        return self.resolve(prop, owner)

    def _resolve_child(self, prop: Property, owner: str) -> str:
        """Child type of a reference or container: user types verbatim, others mapped."""
        if prop.child_is_user_defined:
            return prop.child_type
        return self._lookup(prop.child_type, prop, owner)

    def _resolve_element(self, prop: Property, owner: str) -> str:
        """Element type of a flat array: mapped when known, verbatim when user-defined."""
        element = prop.child_type
        mapped = self.table.lookup(element)
        if mapped is not None:
            return mapped
        if element and prop.child_is_user_defined:
            return element
        raise SchemaTypeError(owner, prop.name, element, reason="unknown array element type")

    def _lookup(self, name: str | None, prop: Property, owner: str) -> str:
        mapped = self.table.lookup(name)
        if mapped is None:
            raise SchemaTypeError(owner, prop.name, name)
        return mapped
