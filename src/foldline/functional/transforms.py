"""Collection transforms: map, filter, reduce, flat map and compact map.

This module provides the element-wise building blocks of a collection
transform pipeline. Every function takes its input collection first and a
caller-supplied callable second, walks the input exactly once in iteration
order and returns a freshly allocated result. Inputs are never mutated.

Operations:
    - **Map**: one output per input element, same order.
    - **Filter**: the input elements accepted by a predicate, same order.
    - **Reduce**: a single value folded left-to-right from a seed.
    - **Flat map**: map to iterables, then concatenate one level.
    - **Optional flat map**: apply a ``None``-producing transform to a value
      that may itself be ``None``.
    - **Compact map**: map, then drop the ``None`` results.

Absence is modelled with ``None``; nothing here raises for a missing value.
Exceptions raised by the callables are not caught and reach the caller as-is.

Examples:
    >>> from foldline.functional.transforms import filter_elements, reduce_elements
    >>> marks = [4, 5, 8, 2, 9, 7]
    >>> reduce_elements(filter_elements(marks, lambda m: m >= 7), 0, lambda a, b: a + b)
    24
"""

import typing as tp

__all__ = [
    "identity",
    "map_elements",
    "map_entries",
    "filter_elements",
    "reduce_elements",
    "flat_map",
    "optional_flat_map",
    "compact_map",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
K = tp.TypeVar("K")
V = tp.TypeVar("V")
A = tp.TypeVar("A")


def identity(value: T) -> T:
    """Return ``value`` unchanged."""
    return value


# =============================================================================
# Map And Filter
# =============================================================================


def map_elements(values: tp.Iterable[T], transform: tp.Callable[[T], U]) -> tp.List[U]:
    """Apply ``transform`` to every element.

    Args:
        values: Finite iterable of input elements.
        transform: Function called once per element, in iteration order.

    Returns:
        A new list where ``result[i] == transform(values[i])``. Its length
        equals the number of input elements.

    Example:
        >>> map_elements([2.0, 4.0, 5.0, 7.0], lambda v: v * v)
        [4.0, 16.0, 25.0, 49.0]
    """
    return [transform(value) for value in values]


def map_entries(
    mapping: tp.Mapping[K, V], transform: tp.Callable[[K, V], U]
) -> tp.List[U]:
    """Apply ``transform(key, value)`` to every entry of a mapping.

    The result is always a list, one item per entry, in the mapping's own
    iteration order. Callers should not rely on that order for mappings
    whose order is not meaningful.

    Example:
        >>> map_entries({"point1": 120.0}, lambda name, miles: miles * 2)
        [240.0]
    """
    return [transform(key, value) for key, value in mapping.items()]


def filter_elements(
    values: tp.Iterable[T], predicate: tp.Callable[[T], tp.Any]
) -> tp.List[T]:
    """Keep the elements for which ``predicate`` is truthy.

    Args:
        values: Finite iterable of input elements.
        predicate: Include condition, called once per element.

    Returns:
        A new list holding the accepted elements in their original relative
        order. It is never longer than the input.

    Example:
        >>> filter_elements([1, 4, 10, 15], lambda d: d % 2 == 0)
        [4, 10]
    """
    return [value for value in values if predicate(value)]


# =============================================================================
# Reduce
# =============================================================================


def reduce_elements(
    values: tp.Iterable[T], initial: A, combine: tp.Callable[[A, T], A]
) -> A:
    """Fold ``values`` into one value, left to right.

    Computes ``acc = combine(acc, element)`` for each element in iteration
    order, starting from ``initial``. The traversal order is the input order,
    so non-commutative combines such as string concatenation give a stable
    result.

    Args:
        values: Finite iterable of input elements.
        initial: Seed accumulator. Returned unchanged when ``values`` is empty.
        combine: Binary function ``(accumulator, element) -> accumulator``.

    Returns:
        The final accumulator.

    Example:
        >>> reduce_elements(["alan", "brian", "charlie"], "===", lambda t, n: f"{t},{n}")
        '===,alan,brian,charlie'
    """
    accumulator = initial
    for value in values:
        accumulator = combine(accumulator, value)
    return accumulator


# =============================================================================
# Flat Map And Compact Map
# =============================================================================


def flat_map(
    values: tp.Iterable[T],
    transform: tp.Callable[[T], tp.Iterable[U]] = identity,  # type: ignore[assignment]
) -> tp.List[U]:
    """Map every element to an iterable and concatenate the results.

    Only one level of nesting is removed. Results are concatenated in
    outer-then-inner order.

    Args:
        values: Finite iterable of input elements.
        transform: Function returning an iterable for each element. Defaults
            to the identity, which flattens a sequence of sequences.

    Returns:
        A new flat list.

    Example:
        >>> flat_map([[5, 2, 7], [4, 8], [9, 1, 3]])
        [5, 2, 7, 4, 8, 9, 1, 3]
    """
    return [item for value in values for item in transform(value)]


def optional_flat_map(
    value: tp.Optional[T], transform: tp.Callable[[T], tp.Optional[U]]
) -> tp.Optional[U]:
    """Apply a ``None``-producing transform to an optional value.

    Returns ``None`` without calling ``transform`` when ``value`` is ``None``.
    Otherwise returns ``transform(value)``, which may itself be ``None``.

    Example:
        >>> optional_flat_map(8, lambda m: m if m > 5 else None)
        8
        >>> optional_flat_map(None, lambda m: m) is None
        True
    """
    if value is None:
        return None
    return transform(value)


def compact_map(
    values: tp.Iterable[T],
    transform: tp.Callable[[T], tp.Optional[U]] = identity,  # type: ignore[assignment]
) -> tp.List[U]:
    """Map every element and drop the ``None`` results.

    Only ``None`` counts as absent; falsy values such as ``0`` or ``""`` are
    kept.

    Example:
        >>> compact_map(["Tom", None, "Peter", None, "Harry"])
        ['Tom', 'Peter', 'Harry']
    """
    results = []
    for value in values:
        result = transform(value)
        if result is not None:
            results.append(result)
    return results
