from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    extension: str = ".axcss"
    encoding: str = "utf-8"
    label_instances: bool = True  # emit /* Instance: Component.name */ headers
