"""Provider-agnostic tool (function) definition offered to a completion model."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass
class ToolDefinition:
    """A callable tool described by a name, a description and a JSON Schema.

    Attributes:
        name: Tool name the model uses when calling it.
        description: Human-readable description shown to the model.
        parameters: JSON Schema object describing the tool arguments.
    """

    name: str
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ToolDefinition"]
