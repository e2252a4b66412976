"""
Option store utilities for metaOrchestra.

Every transformer carries a nested dictionary of options. This module holds
the functions that merge, inspect and derive those stores.
"""

import itertools
from typing import Any, Dict, List, Optional, Sequence, Tuple


def merge_options(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge ``override`` into ``base`` and return the result as a new dictionary.

    When both sides hold a dictionary under the same key the two are merged
    recursively, otherwise the override value wins. Neither input is mutated.

    Args:
        base: Base option store
        override: Options taking precedence over ``base``

    Returns:
        Merged option store
    """
    merged = {
        key: merge_options(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }
    if not override:
        return merged

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_options(merged[key], value)
        elif isinstance(value, dict):
            merged[key] = merge_options(value, {})
        else:
            merged[key] = value
    return merged


def flatten_options(store: Dict[str, Any]) -> List[Tuple[Tuple[str, ...], Any]]:
    """
    Flatten a nested option store into ``(path, value)`` pairs.

    ``path`` is the tuple of keys leading from the root to a non-dict leaf.
    """
    entries = []
    for key, value in store.items():
        if isinstance(value, dict):
            for inner_path, inner_value in flatten_options(value):
                entries.append(((key,) + inner_path, inner_value))
        else:
            entries.append(((key,), value))
    return entries


def set_option_path(store: Dict[str, Any], path: Sequence[str], value: Any) -> None:
    """
    Replace the leaf reached by ``path`` in place.

    Raises:
        KeyError: If any key along the path (the leaf included) is absent
    """
    if not path:
        raise KeyError("Empty option path")
    inner = store
    for key in path[:-1]:
        inner = inner[key]
    if path[-1] not in inner:
        raise KeyError(path[-1])
    inner[path[-1]] = value


def derive(prototype, overrides: Optional[Dict[str, Any]] = None):
    """
    Create a new transformer of the same class as ``prototype``.

    The new instance is configured with the prototype's options merged with
    ``overrides``. The prototype is left untouched.

    Args:
        prototype: Transformer to copy the configuration from
        overrides: Options overriding the prototype's options

    Returns:
        New, unfitted transformer
    """
    return type(prototype)(merge_options(prototype.options, overrides))


def expand_options_grid(grid: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Expand an options grid into the list of option overrides it describes.

    A grid is a nested dictionary whose leaves are lists of candidate values.
    One override is produced per element of the cartesian product of the
    leaves, enumerated with paths in sorted order.

    Args:
        grid: Options grid, or None for a single empty override

    Returns:
        List of nested option overrides
    """
    if not grid:
        return [{}]

    leaves = sorted(flatten_options(grid), key=lambda entry: entry[0])
    paths = [path for path, _ in leaves]
    choices = [list(values) for _, values in leaves]

    overrides = []
    for combination in itertools.product(*choices):
        override = merge_options(grid, {})
        for path, value in zip(paths, combination):
            set_option_path(override, path, value)
        overrides.append(override)
    return overrides
