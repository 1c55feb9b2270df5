"""
Exceptions raised while loading a schema context and generating C# code.

Every message names the schema entity involved so the schema author can
locate the problem in the source schema.
"""

from __future__ import annotations


class SchemaCodegenError(Exception):
    """Base class for all errors raised by schema_to_cs."""

    pass


class SchemaLoadError(SchemaCodegenError):
    """Raised when a context dictionary does not have the expected shape."""

    pass


class SchemaTypeError(SchemaCodegenError):
    """Raised when a property type cannot be mapped to a C# type.

    Attributes:
        entity: Name of the class or interface owning the property
        property_name: Name of the offending property
        declared_type: The type name that could not be resolved
    """

    def __init__(self, entity: str, property_name: str, declared_type: str | None, reason: str = "unknown type"):
        self.entity = entity
        self.property_name = property_name
        self.declared_type = declared_type
        super().__init__(f"{entity}.{property_name}: {reason} '{declared_type}'")


class MalformedEnumMemberError(SchemaCodegenError):
    """Raised when an enum member value is neither a number nor text."""

    def __init__(self, entity: str, member_name: str, declared: object):
        self.entity = entity
        self.member_name = member_name
        self.declared = declared
        super().__init__(f"{entity}.{member_name}: enum member value must be a number or a string, got {type(declared).__name__} {declared!r}")


class DuplicateOutputError(SchemaCodegenError):
    """Raised when two descriptors would be written to the same file."""

    def __init__(self, file_name: str, first: str, second: str):
        self.file_name = file_name
        super().__init__(f"Output file {file_name} would be produced by both {first} and {second}")


class GeneratedCodeError(SchemaCodegenError):
    """Raised when generated C# text fails validation before being written.

    This can happen when:
    - Braces are unbalanced
    - No type declaration is present
    - A namespace is required but missing
    """

    pass
