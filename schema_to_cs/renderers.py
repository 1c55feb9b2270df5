"""
Structure renderers.

Each renderer turns one schema descriptor into the complete text of a C#
source file using a Jinja2 template.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from .config import GenerateOptions
from .context import ClassDef, EnumDef, InterfaceDef
from .csharp_nodes import CSharpAttribute, CSharpConstructor, CSharpEnumMember, CSharpField, CSharpSerializer, MemberModifier
from .properties import PropertyRenderer

TEMPLATE_DIR = Path(__file__).parent / "templates" / "cs"


def create_environment() -> jinja2.Environment:
    """Create the Jinja2 environment holding the C# templates."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


class StructureRenderer(ABC):
    """Abstract base class for descriptor renderers."""

    # Template file name
    TEMPLATE_NAME: str = ""

    def __init__(
        self,
        jinja_env: jinja2.Environment,
        property_renderer: PropertyRenderer,
        options: GenerateOptions,
        generation_comment: str = "",
    ):
        """
        Initialize the renderer.

        Args:
            jinja_env: Environment the templates are loaded from
            property_renderer: Renderer for class and interface properties
            options: Generation options
            generation_comment: Comment block placed at the top of every file
        """
        self.jinja_env = jinja_env
        self.property_renderer = property_renderer
        self.options = options
        self.generation_comment = generation_comment
        self.serializer = CSharpSerializer()

    def render(self, descriptor: Any) -> str:
        """Render a descriptor to C# source."""
        template = self.jinja_env.get_template(self._template_name(descriptor))
        ctx = self._base_context()
        ctx.update(self._prepare_context(descriptor))
        return template.render(ctx)

    def _template_name(self, descriptor: Any) -> str:
        return self.TEMPLATE_NAME

    def _base_context(self) -> dict[str, Any]:
        return {
            "generation_comment": self.generation_comment,
            "csharp_namespace": self.options.namespace,
            "indent": self.options.indent,
        }

    @property
    def member_indent(self) -> str:
        """Indentation of members inside a top-level declaration."""
        return self.options.indent + "\t"

    @abstractmethod
    def _prepare_context(self, descriptor: Any) -> dict[str, Any]:
        """
        Prepare the template variables for a descriptor.

        Args:
            descriptor: The schema descriptor

        Returns:
            Dictionary of template variables
        """


class ClassRenderer(StructureRenderer):
    """Renders a schema class as a partial Colyseus.Schema type."""

    TEMPLATE_NAME = "class.cs.jinja2"

    def _prepare_context(self, klass: ClassDef) -> dict[str, Any]:
        # [Preserve] keeps the constructor through Unity code stripping
        constructor = CSharpConstructor(class_name=klass.name, attributes=[CSharpAttribute(name="Preserve")])
        indent = self.options.indent
        return {
            "class_name": klass.name,
            "base_class": klass.extends,
            "constructor": "\n".join(self.serializer.serialize_constructor(constructor, self.member_indent)),
            "properties": [self.property_renderer.render(prop, klass.name, indent) for prop in klass.properties],
        }


class InterfaceRenderer(StructureRenderer):
    """Renders a schema interface as a MessagePack DTO."""

    TEMPLATE_NAME = "interface.cs.jinja2"

    def _prepare_context(self, interface: InterfaceDef) -> dict[str, Any]:
        indent = self.options.indent
        return {
            "class_name": interface.name,
            "extra_using": self.options.using,
            "fields": [self.property_renderer.render_interface_field(prop, interface.name, indent) for prop in interface.properties],
        }


class EnumRenderer(StructureRenderer):
    """Renders a schema enum as an integer enum or as a struct of constants."""

    ENUM_TEMPLATE_NAME = "enum.cs.jinja2"
    STRUCT_TEMPLATE_NAME = "struct.cs.jinja2"

    def _template_name(self, enum: EnumDef) -> str:
        return self.ENUM_TEMPLATE_NAME if enum.is_enumeration else self.STRUCT_TEMPLATE_NAME

    def _prepare_context(self, enum: EnumDef) -> dict[str, Any]:
        values = enum.member_values()
        if enum.is_enumeration:
            members = [self.serializer.serialize_enum_member(CSharpEnumMember(name=m.name, value=value.literal), self.member_indent) for m, value in zip(enum.members, values)]
        else:
            members = []
            for m, value in zip(enum.members, values):
                constant = CSharpField(
                    name=m.name,
                    type_name=value.data_type,
                    modifiers=[MemberModifier.CONST],
                    default_value=value.literal,
                )
                members.extend(self.serializer.serialize_field(constant, self.member_indent))
        return {
            "enum_name": enum.name,
            "members": members,
        }
