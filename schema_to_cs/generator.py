"""
C# generator entry point.

Walks a schema context and renders one C# source file per class, interface
and enum.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import GenerateOptions
from .context import Context, DescriptorKind
from .errors import DuplicateOutputError
from .properties import PropertyRenderer
from .renderers import ClassRenderer, EnumRenderer, InterfaceRenderer, StructureRenderer, create_environment
from .type_table import TypeResolver, TypeTable

logger = logging.getLogger(__name__)

# Enum encoding the wire protocol operation codes, never a user-facing type
RESERVED_ENUM_NAMES = frozenset({"OPERATION"})

GENERATION_COMMENT_TEMPLATE = """//
// THIS FILE HAS BEEN GENERATED AUTOMATICALLY
// DO NOT CHANGE IT MANUALLY UNLESS YOU KNOW WHAT YOU'RE DOING
//
// Generated by schema_to_cs v{version} : {command_line}
//"""


@dataclass(frozen=True)
class GeneratedFile:
    """A generated source file, ready to be written by the caller."""

    name: str
    content: str


class CSharpGenerator:
    """Generates C# source files from a schema context."""

    FILE_EXTENSION = "cs"

    RENDERERS: dict[DescriptorKind, type[StructureRenderer]] = {
        DescriptorKind.CLASS: ClassRenderer,
        DescriptorKind.INTERFACE: InterfaceRenderer,
        DescriptorKind.ENUM: EnumRenderer,
    }

    def __init__(self, context: Context, options: GenerateOptions | None = None):
        """
        Initialize the generator.

        Args:
            context: The resolved schema
            options: Generation options (defaults to GenerateOptions())
        """
        self.context = context
        self.options = options or GenerateOptions()
        # Enums resolve as types regardless of declaration order
        self.type_table = TypeTable(enum.name for enum in context.enums)
        self.resolver = TypeResolver(self.type_table)
        self.property_renderer = PropertyRenderer(self.resolver)
        self.jinja_env = create_environment()
        generation_comment = self._generation_comment()
        self.renderers = {kind: renderer(self.jinja_env, self.property_renderer, self.options, generation_comment) for kind, renderer in self.RENDERERS.items()}

    def generate(self) -> list[GeneratedFile]:
        """
        Render every descriptor of the context.

        Returns:
            Files in context order: classes, then interfaces, then enums

        Raises:
            SchemaTypeError: If a property type cannot be resolved
            DuplicateOutputError: If two descriptors map to the same file name
        """
        files: list[GeneratedFile] = []
        owners: dict[str, str] = {}

        for descriptor in self.context.descriptors():
            if descriptor.kind == DescriptorKind.ENUM and descriptor.name in RESERVED_ENUM_NAMES:
                logger.debug("Skipping reserved enum %s", descriptor.name)
                continue

            file_name = f"{descriptor.name}.{self.FILE_EXTENSION}"
            owner = f"{descriptor.kind.value} {descriptor.name}"
            if file_name in owners:
                raise DuplicateOutputError(file_name, owners[file_name], owner)
            owners[file_name] = owner

            content = self.renderers[descriptor.kind].render(descriptor)
            files.append(GeneratedFile(name=file_name, content=content))

        logger.debug(
            "Generated %d files (%d classes, %d interfaces, %d enums)",
            len(files),
            len(self.context.classes),
            len(self.context.interfaces),
            len(self.context.enums),
        )
        return files

    def _generation_comment(self) -> str:
        if not self.options.add_generation_comment:
            return ""

        try:
            from .cli import schema_to_cs

            command_line = reconstruct_command_line(schema_to_cs)
        except (ImportError, AttributeError):
            command_line = "schema_to_cs"

        return GENERATION_COMMENT_TEMPLATE.format(version=__version__, command_line=command_line)


def generate(context: Context, options: GenerateOptions | None = None) -> list[GeneratedFile]:
    """Generate one C# file per class, interface and non-reserved enum of the context."""
    return CSharpGenerator(context, options).generate()
