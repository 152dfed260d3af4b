"""Property merge: overlays instance values onto component defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from axcss.model.component import ComponentDefinition


@dataclass(frozen=True)
class MergeResult:
    """The effective environment for one instance.

    ``missing`` lists parameters that had neither an instance value nor a
    default; such an environment must not be rendered.
    """

    environment: dict[str, str] = field(default_factory=dict)
    missing: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing


def merge_properties(component: ComponentDefinition, properties: dict[str, str]) -> MergeResult:
    """Resolve every declared parameter: instance value > component default."""
    environment: dict[str, str] = {}
    missing: list[str] = []
    for param in component.parameters:
        if param.name in environment or param.name in missing:
            continue
        if param.name in properties:
            environment[param.name] = properties[param.name]
        elif param.default is not None:
            environment[param.name] = param.default
        else:
            missing.append(param.name)
    return MergeResult(environment=environment, missing=tuple(missing))
