"""
Configuration for C# generation.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class GenerateOptions:
    """Options controlling the shape of the generated files."""

    # Namespace to wrap all declarations in (e.g., "MyGame.Schema")
    namespace: str | None = None

    # Extra using directive emitted in interface (DTO) files only
    using: str | None = None

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    @property
    def indent(self) -> str:
        """Indentation of top-level declarations."""
        return "\t" if self.namespace else ""

    @staticmethod
    def from_dict(d: dict) -> GenerateOptions:
        """Create options from a dictionary."""
        options = GenerateOptions()
        names = {f.name for f in fields(GenerateOptions)}
        for k, v in d.items():
            if k in names:
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "namespace": self.namespace,
            "using": self.using,
            "add_generation_comment": self.add_generation_comment,
        }
