"""Component model: Parameter, ComponentDefinition and InstanceRequest dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    """A single component parameter with an optional default value."""

    name: str
    default: str | None = None

    @property
    def required(self) -> bool:
        """A parameter without a default must be supplied by every instance."""
        return self.default is None


@dataclass(frozen=True)
class ComponentDefinition:
    """A parsed ``component Name(params) { body }`` block.

    ``offset`` points at the ``component`` keyword and ``body_offset`` at the
    first character of the trimmed body, both in the text that was scanned.
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    body: str = ""
    origin_source: str | None = None
    offset: int = 0
    body_offset: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Component name must be a non-empty string")

    def parameter(self, name: str) -> Parameter | None:
        """Return the first parameter called *name*, if declared."""
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def declares(self, name: str) -> bool:
        return self.parameter(name) is not None


@dataclass(frozen=True)
class InstanceRequest:
    """A parsed ``Component.instance { $prop: value; }`` block."""

    component_name: str
    instance_name: str
    properties: dict[str, str] = field(default_factory=dict)
    raw_body: str = ""
    offset: int = 0
    body_offset: int = 0

    @property
    def qualified_name(self) -> str:
        return f"{self.component_name}.{self.instance_name}"
