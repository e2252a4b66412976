import numbers

import numpy as np
import pandas as pd
import pytest

from metaOrchestra.core.exceptions import InferenceError
from metaOrchestra.core.variable_types import (
    NominalVar,
    NumericVar,
    infer_element_type,
    infer_variable_type,
    is_missing,
    missing_mask,
)


def test_numeric_values_are_numeric():
    assert infer_variable_type([1, 2, 3]) == NumericVar()
    assert infer_variable_type(np.array([1.5, 2.0])) == NumericVar()


def test_mixed_int_and_float_join_to_real():
    assert infer_element_type([1, 2.5]) is numbers.Real
    assert infer_variable_type([1, 2.5, np.int64(3)]) == NumericVar()


def test_strings_are_nominal_with_categories():
    var_type = infer_variable_type(["a", "b", "a"])
    assert isinstance(var_type, NominalVar)
    assert var_type.categories == {"a", "b"}


def test_missing_values_are_ignored():
    assert infer_variable_type([None, "x", float("nan"), "y"]) == NominalVar(frozenset({"x", "y"}))
    assert infer_variable_type(np.array([np.nan, 1.0, 2.0])) == NumericVar()


def test_empty_input_raises():
    with pytest.raises(InferenceError):
        infer_variable_type([])
    with pytest.raises(InferenceError):
        infer_variable_type([None, float("nan")])


def test_unclassifiable_type_raises():
    with pytest.raises(InferenceError):
        infer_variable_type([1, "a"])
    with pytest.raises(InferenceError):
        infer_variable_type([(1, 2), (3, 4)])


def test_element_type_of_empty_array_falls_back_to_dtype():
    assert infer_element_type(np.array([], dtype=np.float64)) is np.float64
    assert infer_element_type([]) is None


def test_element_type_join_keeps_common_class():
    assert infer_element_type(["a", np.str_("b")]) is str
    assert infer_element_type([True, 1]) is int


def test_is_missing():
    assert is_missing(None)
    assert is_missing(pd.NA)
    assert is_missing(float("nan"))
    assert is_missing(np.float32("nan"))
    assert not is_missing(0)
    assert not is_missing("NA")
    assert missing_mask([1, None, np.nan]).tolist() == [False, True, True]
