"""foldline: map, filter, reduce, flat map and compact map over collections."""

from foldline.core.pipeline import Pipeline
from foldline.functional.transforms import (
    compact_map,
    filter_elements,
    flat_map,
    identity,
    map_elements,
    map_entries,
    optional_flat_map,
    reduce_elements,
)

__all__ = [
    "Pipeline",
    "compact_map",
    "filter_elements",
    "flat_map",
    "identity",
    "map_elements",
    "map_entries",
    "optional_flat_map",
    "reduce_elements",
]
