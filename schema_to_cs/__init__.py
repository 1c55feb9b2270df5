"""Schema to C# Generator

A Python package for generating C# source from a resolved schema context.
Classes become Colyseus.Schema types, interfaces become MessagePack DTOs,
and enums become integer enums or constant structs.
"""

import logging

__version__ = "1.0.0"

from .config import GenerateOptions
from .context import (
    ClassDef,
    Context,
    DescriptorKind,
    EnumDef,
    EnumMember,
    InterfaceDef,
    MemberValue,
    MemberValueKind,
    Property,
)
from .errors import (
    DuplicateOutputError,
    GeneratedCodeError,
    MalformedEnumMemberError,
    SchemaCodegenError,
    SchemaLoadError,
    SchemaTypeError,
)
from .generator import CSharpGenerator, GeneratedFile, generate
from .type_table import TypeResolver, TypeTable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "generate",
    "CSharpGenerator",
    "GeneratedFile",
    "GenerateOptions",
    "Context",
    "ClassDef",
    "InterfaceDef",
    "EnumDef",
    "EnumMember",
    "MemberValue",
    "MemberValueKind",
    "Property",
    "DescriptorKind",
    "TypeTable",
    "TypeResolver",
    "SchemaCodegenError",
    "SchemaTypeError",
    "SchemaLoadError",
    "MalformedEnumMemberError",
    "DuplicateOutputError",
    "GeneratedCodeError",
]
