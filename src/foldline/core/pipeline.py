"""Chainable, immutable collection pipeline.

:class:`Pipeline` wraps an ordered sequence of elements and exposes the
transforms of :mod:`foldline.functional.transforms` as methods, so a chain
reads left to right::

    total_pass = Pipeline.of([4, 5, 8, 2, 9, 7]).filter(lambda m: m >= 7).reduce(
        0, operator.add
    )

Every stage is eager: it fully materializes its output into a new
``Pipeline`` before the next stage runs. A pipeline is never modified in
place, so an intermediate stage can be reused for several chains.

When ``TRACE_STAGES`` is enabled in the settings, each stage logs its input
and output sizes at DEBUG level.
"""

from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from foldline.config import get_settings
from foldline.core.types import Elements
from foldline.functional.transforms import (
    compact_map,
    filter_elements,
    flat_map,
    identity,
    map_elements,
    map_entries,
    reduce_elements,
)
from foldline.logger.logger import logger

__all__ = ["Pipeline"]


class Pipeline(BaseModel):
    """An immutable ordered sequence with chainable collection transforms.

    Attributes:
        elements: The elements of this stage, frozen into a tuple.
    """

    model_config = ConfigDict(frozen=True)

    elements: Elements = Field(
        default_factory=tuple, description="Ordered elements of this stage."
    )

    @classmethod
    def of(cls, values: Iterable[Any]) -> "Pipeline":
        """Start a pipeline from any finite iterable."""
        return cls(elements=values)

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[Any, Any], transform: Callable[[Any, Any], Any]
    ) -> "Pipeline":
        """Start a pipeline by mapping every ``(key, value)`` entry of a mapping.

        Args:
            mapping: Source mapping.
            transform: Called as ``transform(key, value)`` once per entry.

        Returns:
            A pipeline with one element per entry, in the mapping's iteration
            order.
        """
        return cls(elements=map_entries(mapping, transform))

    def _stage(self, name: str, results: List[Any]) -> "Pipeline":
        if get_settings().TRACE_STAGES:
            logger.debug(f"{name}: {len(self.elements)} -> {len(results)} elements")
        return type(self)(elements=results)

    # --- Transforms ---

    def map(self, transform: Callable[[Any], Any]) -> "Pipeline":
        """Apply ``transform`` to every element."""
        return self._stage("map", map_elements(self.elements, transform))

    def filter(self, predicate: Callable[[Any], Any]) -> "Pipeline":
        """Keep the elements for which ``predicate`` is truthy."""
        return self._stage("filter", filter_elements(self.elements, predicate))

    def flat_map(
        self, transform: Callable[[Any], Iterable[Any]] = identity
    ) -> "Pipeline":
        """Map every element to an iterable and concatenate the results."""
        return self._stage("flat_map", flat_map(self.elements, transform))

    def compact_map(
        self, transform: Callable[[Any], Optional[Any]] = identity
    ) -> "Pipeline":
        """Map every element and drop the ``None`` results."""
        return self._stage("compact_map", compact_map(self.elements, transform))

    # --- Terminal operations ---

    def reduce(self, initial: Any, combine: Callable[[Any, Any], Any]) -> Any:
        """Fold the elements left to right, starting from ``initial``."""
        result = reduce_elements(self.elements, initial, combine)
        if get_settings().TRACE_STAGES:
            logger.debug(f"reduce: {len(self.elements)} -> 1 value")
        return result

    def to_list(self) -> List[Any]:
        """Return the elements as a new list."""
        return list(self.elements)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.elements)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return type(self)(elements=self.elements[index])
        return self.elements[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(elements={list(self.elements)!r})"
