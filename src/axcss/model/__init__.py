"""axcss model layer -- public type re-exports."""

from axcss.model.component import ComponentDefinition, InstanceRequest, Parameter
from axcss.model.diagnostic import Diagnostic, Severity

__all__ = [
    # components
    "Parameter",
    "ComponentDefinition",
    "InstanceRequest",
    # diagnostic
    "Severity",
    "Diagnostic",
]
