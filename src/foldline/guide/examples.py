"""Worked examples for map, filter, reduce, flat map and compact map.

Each example evaluates one short expression over a fixed literal and records
the value it is expected to produce. The examples are grouped in the same
sections a reader meets them in: Map, Filter, Reduce, FlatMap, CompactMap and
Chaining.

The number-to-words example needs a ``spell_out(n) -> str`` formatter. No
formatter ships with foldline; callers inject one (for instance a locale-aware
library) and the example is skipped when none is given.

Example:
    >>> from foldline.guide.examples import run_all
    >>> results = run_all()
    >>> all(result.matches for result in results)
    True
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from foldline.config import get_settings
from foldline.core.pipeline import Pipeline
from foldline.functional.transforms import (
    compact_map,
    filter_elements,
    flat_map,
    map_elements,
    map_entries,
    optional_flat_map,
    reduce_elements,
)
from foldline.logger.logger import logger

__all__ = [
    "GuideExample",
    "GuideResult",
    "EXAMPLES",
    "SPELLED_SCORES",
    "MILES_TO_KM",
    "parse_int",
    "run_all",
    "run_example",
    "by_section",
]

SpellOut = Callable[[int], str]

MILES_TO_KM = 1.6093

# Literals shared by several examples
VALUES = [2.0, 4.0, 5.0, 7.0]
SCORES = [0, 28, 124]
MILES_TO_POINT = {"point1": 120.0, "point2": 50.0, "point3": 70.0}
DIGITS = [1, 4, 10, 15]
CODES = ["abc", "def", "ghi"]
NAMES = ["alan", "brian", "charlie"]
RESULTS = [[5, 2, 7], [4, 8], [9, 1, 3]]
KEYS: List[Optional[str]] = ["Tom", None, "Peter", None, "Harry"]
MARKS = [4, 5, 8, 2, 9, 7]
NUMBERS = [20, 17, 35, 4, 12]


def parse_int(text: str) -> Optional[int]:
    """Parse a base-10 integer, returning ``None`` when ``text`` is not one."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def is_even(value: int) -> bool:
    return value % 2 == 0


def square(value):
    return value * value


# =============================================================================
# Examples
# =============================================================================


def squares() -> List[float]:
    return map_elements(VALUES, square)


def spelled_scores(spell_out: SpellOut) -> List[str]:
    return map_elements(SCORES, spell_out)


def km_to_point() -> List[float]:
    return map_entries(MILES_TO_POINT, lambda name, miles: miles * MILES_TO_KM)


def even_digits() -> List[int]:
    return filter_elements(DIGITS, is_even)


def total() -> float:
    return reduce_elements(VALUES, 10.0, operator.add)


def text() -> str:
    return reduce_elements(CODES, "", operator.add)


def csv() -> str:
    return reduce_elements(NAMES, "===", lambda text, name: f"{text},{name}")


def all_results() -> List[int]:
    return flat_map(RESULTS)


def pass_marks() -> List[int]:
    return flat_map(RESULTS, lambda marks: filter_elements(marks, lambda m: m > 5))


def pass_mark(text: str = "8") -> Optional[int]:
    """Parse ``text`` and keep the mark only if it is a pass (``> 5``)."""
    return optional_flat_map(parse_int(text), lambda m: m if m > 5 else None)


def valid_names() -> List[str]:
    return compact_map(KEYS)


def name_counts() -> List[int]:
    return compact_map(KEYS, lambda name: optional_flat_map(name, len))


def total_pass() -> int:
    return Pipeline.of(MARKS).filter(lambda m: m >= 7).reduce(0, operator.add)


def even_squares() -> List[int]:
    return Pipeline.of(NUMBERS).filter(is_even).map(square).to_list()


# =============================================================================
# Registry
# =============================================================================


@dataclass(frozen=True)
class GuideExample:
    """One worked example and the value it is documented to produce.

    Attributes:
        section: Guide section, e.g. ``"Map"`` or ``"Chaining"``.
        title: Short name of the example.
        expression: The expression as a reader would write it.
        expected: Documented result.
        compute: Zero-argument callable producing the actual result.
    """

    section: str
    title: str
    expression: str
    expected: Any
    compute: Callable[[], Any]


@dataclass(frozen=True)
class GuideResult:
    example: GuideExample
    actual: Any
    matches: bool


SPELLED_SCORES = ["zero", "twenty-eight", "one hundred twenty-four"]

EXAMPLES: List[GuideExample] = [
    GuideExample(
        section="Map",
        title="squares",
        expression="map_elements(values, lambda v: v * v)",
        expected=[4.0, 16.0, 25.0, 49.0],
        compute=squares,
    ),
    GuideExample(
        section="Map",
        title="miles to km",
        expression="map_entries(miles_to_point, lambda name, miles: miles * 1.6093)",
        expected=[193.116, 80.465, 112.651],
        compute=km_to_point,
    ),
    GuideExample(
        section="Filter",
        title="even digits",
        expression="filter_elements(digits, is_even)",
        expected=[4, 10],
        compute=even_digits,
    ),
    GuideExample(
        section="Reduce",
        title="total",
        expression="reduce_elements(items, 10.0, operator.add)",
        expected=28.0,
        compute=total,
    ),
    GuideExample(
        section="Reduce",
        title="concatenate",
        expression='reduce_elements(codes, "", operator.add)',
        expected="abcdefghi",
        compute=text,
    ),
    GuideExample(
        section="Reduce",
        title="csv",
        expression='reduce_elements(names, "===", lambda t, n: f"{t},{n}")',
        expected="===,alan,brian,charlie",
        compute=csv,
    ),
    GuideExample(
        section="FlatMap",
        title="flatten",
        expression="flat_map(results)",
        expected=[5, 2, 7, 4, 8, 9, 1, 3],
        compute=all_results,
    ),
    GuideExample(
        section="FlatMap",
        title="pass marks",
        expression="flat_map(results, lambda r: filter_elements(r, lambda m: m > 5))",
        expected=[7, 8, 9],
        compute=pass_marks,
    ),
    GuideExample(
        section="FlatMap",
        title="optional",
        expression='optional_flat_map(parse_int("8"), lambda m: m if m > 5 else None)',
        expected=8,
        compute=pass_mark,
    ),
    GuideExample(
        section="CompactMap",
        title="valid names",
        expression="compact_map(keys)",
        expected=["Tom", "Peter", "Harry"],
        compute=valid_names,
    ),
    GuideExample(
        section="CompactMap",
        title="name lengths",
        expression="compact_map(keys, lambda k: optional_flat_map(k, len))",
        expected=[3, 5, 5],
        compute=name_counts,
    ),
    GuideExample(
        section="Chaining",
        title="total pass",
        expression="Pipeline.of(marks).filter(lambda m: m >= 7).reduce(0, operator.add)",
        expected=24,
        compute=total_pass,
    ),
    GuideExample(
        section="Chaining",
        title="even squares",
        expression="Pipeline.of(numbers).filter(is_even).map(square)",
        expected=[400, 16, 144],
        compute=even_squares,
    ),
]


def _normalize(value: Any, digits: int) -> Any:
    if isinstance(value, float):
        return round(value, digits)
    if isinstance(value, (list, tuple)):
        return [_normalize(item, digits) for item in value]
    return value


def run_example(example: GuideExample) -> GuideResult:
    """Evaluate one example and compare it with its expected value.

    Floats are compared after rounding to ``ROUND_DIGITS`` decimal places.
    Exceptions raised while computing propagate to the caller.
    """
    digits = get_settings().ROUND_DIGITS
    actual = example.compute()
    matches = _normalize(actual, digits) == _normalize(example.expected, digits)
    if not matches:
        logger.debug(
            f"{example.section}/{example.title}: expected {example.expected!r}, got {actual!r}"
        )
    return GuideResult(example=example, actual=actual, matches=matches)


def run_all(spell_out: Optional[SpellOut] = None) -> List[GuideResult]:
    """Evaluate every example in guide order.

    Args:
        spell_out: Number-to-words formatter. When given, the spelled-out
            scores example is evaluated right after the squares example.

    Returns:
        One result per evaluated example.
    """
    examples = list(EXAMPLES)
    if spell_out is not None:
        examples.insert(
            1,
            GuideExample(
                section="Map",
                title="spelled scores",
                expression="map_elements(scores, spell_out)",
                expected=SPELLED_SCORES,
                compute=lambda: spelled_scores(spell_out),
            ),
        )
    else:
        logger.debug("No spell_out formatter given; skipping spelled scores example")
    return [run_example(example) for example in examples]


def by_section(results: List[GuideResult]) -> Dict[str, List[GuideResult]]:
    """Group results by section, keeping guide order."""
    return reduce_elements(
        results,
        {},
        lambda groups, result: {
            **groups,
            result.example.section: groups.get(result.example.section, []) + [result],
        },
    )
