from axcss.conditions import evaluate_whens
from axcss.transforms.environment import MergeResult, merge_properties
from axcss.transforms.variable_expansion import substitute

BUILTIN_TRANSFORMS = [
    evaluate_whens,
    substitute,
]


def apply_transforms(body, environment, custom_transforms=None):
    """Run ``when`` evaluation then substitution (and any custom steps) over *body*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        body = t(body, environment)
    return body


__all__ = ["MergeResult", "merge_properties", "substitute", "apply_transforms"]
