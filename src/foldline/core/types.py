"""Reusable type definitions for the foldline core.

Type Aliases:
    Elements: The validated element storage of a pipeline. Any finite,
        non-mapping iterable is accepted and frozen into a tuple.
"""

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Tuple

from pydantic.functional_validators import BeforeValidator

__all__ = [
    "Elements",
    "freeze_elements",
]


def freeze_elements(values: Any) -> Tuple[Any, ...]:
    """Validator turning an iterable into an immutable tuple.

    Args:
        values: Finite iterable of elements.

    Returns:
        The elements as a tuple, in iteration order.

    Raises:
        ValueError: If ``values`` is a mapping or is not iterable.
    """
    if isinstance(values, tuple):
        return values
    if isinstance(values, Mapping):
        raise ValueError(
            "Mappings are not ordered sequences; use Pipeline.from_mapping instead."
        )
    if not isinstance(values, Iterable):
        raise ValueError(f"Expected an iterable, got {type(values).__name__}.")
    return tuple(values)


Elements = Annotated[Tuple[Any, ...], BeforeValidator(freeze_elements)]
