"""
Property rendering.

Turns a schema property into a C# field declaration carrying the attributes
the Colyseus.Schema runtime needs to decode it.
"""

from __future__ import annotations

from .context import Property
from .csharp_nodes import CSharpAttribute, CSharpField, CSharpSerializer
from .type_table import TypeResolver


class PropertyRenderer:
    """Renders properties of classes and interfaces."""

    def __init__(self, resolver: TypeResolver):
        self.resolver = resolver
        self.serializer = CSharpSerializer()

    def build_field(self, prop: Property, owner: str = "") -> CSharpField:
        """
        Build the field node of a schema-tracked property.

        Args:
            prop: The property
            owner: Name of the class owning the property

        Returns:
            Field node with its [Type] and, if deprecated, [System.Obsolete] attributes
        """
        type_name = self.resolver.resolve(prop, owner)

        type_args = [str(prop.index), f'"{prop.type}"']
        if prop.child_type is not None:
            type_args.append(f"typeof({type_name})")
            if not prop.child_is_user_defined:
                type_args.append(f'"{prop.child_type}"')
            initializer = "new()"
        else:
            initializer = "default"

        node = CSharpField(name=prop.name, type_name=type_name, default_value=initializer)
        if prop.deprecated:
            node.attributes.append(
                CSharpAttribute(
                    name="System.Obsolete",
                    arguments=[f"\"field '{prop.name}' is deprecated.\"", "true"],
                )
            )
        node.attributes.append(CSharpAttribute(name="Type", arguments=type_args))
        return node

    def render(self, prop: Property, owner: str = "", indent: str = "") -> str:
        """Render a schema-tracked field, one level inside the declaration at ``indent``."""
        node = self.build_field(prop, owner)
        return "\n".join(self.serializer.serialize_field(node, indent + "\t"))

    def render_interface_field(self, prop: Property, owner: str = "", indent: str = "") -> str:
        """Render a plain DTO field without initializer."""
        node = CSharpField(name=prop.name, type_name=self.resolver.resolve_for_interface(prop, owner))
        return "\n".join(self.serializer.serialize_field(node, indent + "\t"))
