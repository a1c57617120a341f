"""Core data structures for collection pipelines."""

from foldline.core.pipeline import Pipeline
from foldline.core.types import Elements

__all__ = [
    "Pipeline",
    "Elements",
]
