"""
Variable type inference for metaOrchestra.

A column of raw values is classified as numeric or nominal. Nominal variables
carry the set of categories observed in the data.
"""

import numbers
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional

import numpy as np
import pandas as pd

from .exceptions import InferenceError


@dataclass(frozen=True)
class NumericVar:
    """Variable taking real values."""


@dataclass(frozen=True)
class NominalVar:
    """Variable taking one of a finite set of symbolic values."""
    categories: FrozenSet[Any]


def is_missing(value: Any) -> bool:
    """Return True for the missing-value sentinels and for float NaN."""
    if value is None or value is pd.NA:
        return True
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def missing_mask(values: Iterable[Any]) -> np.ndarray:
    """Boolean mask flagging the missing entries of ``values``."""
    return np.array([is_missing(value) for value in values], dtype=bool)


def _join_types(left: Optional[type], right: type) -> type:
    """Least upper bound of two types."""
    if left is None or issubclass(right, left):
        return left if left is not None else right
    if issubclass(left, right):
        return right
    for abstract in (numbers.Integral, numbers.Real, numbers.Number):
        if issubclass(left, abstract) and issubclass(right, abstract):
            return abstract
    for klass in left.__mro__:
        if issubclass(right, klass):
            return klass
    return object


def infer_element_type(values: Iterable[Any]) -> Optional[type]:
    """
    Infer the common element type of a collection.

    The type is the join of the concrete types of all elements. An empty
    numpy array falls back to the scalar type of its dtype; any other empty
    collection yields None.

    Args:
        values: Collection to inspect

    Returns:
        Inferred element type, or None when nothing can be inferred
    """
    element_type = None
    for value in values:
        element_type = _join_types(element_type, type(value))

    if element_type is None and isinstance(values, (np.ndarray, pd.Series)):
        element_type = values.dtype.type
    return element_type


def infer_variable_type(values: Iterable[Any]):
    """
    Infer whether ``values`` form a numeric or a nominal variable.

    Missing entries are ignored. Booleans count as numeric.

    Args:
        values: One column of raw values

    Returns:
        NumericVar or NominalVar

    Raises:
        InferenceError: If no non-missing values remain or their type is
            neither numeric nor text
    """
    present = [value for value in values if not is_missing(value)]
    if not present:
        raise InferenceError("Cannot infer variable type for empty array")

    element_type = infer_element_type(present)
    if issubclass(element_type, numbers.Real):
        return NumericVar()
    if issubclass(element_type, str):
        return NominalVar(frozenset(present))
    raise InferenceError(f"Cannot infer variable type for: {element_type.__name__}")
