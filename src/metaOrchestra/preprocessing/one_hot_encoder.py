"""
One-hot encoding for metaOrchestra.

Nominal columns are replaced by one indicator column per category; numeric
columns are passed through as floats. Nominal columns are found with
variable type inference unless they are given explicitly.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from ..core.base import Transformer
from ..core.exceptions import ShapeError
from ..core.variable_types import NominalVar, infer_variable_type, is_missing
from ..utils.helpers import ArrayLike, as_matrix


def _category_order(categories) -> List[Any]:
    return sorted(categories, key=str)


def _is_nominal(values: np.ndarray) -> bool:
    # Columns holding only missing values stay numeric (NaN passthrough)
    if all(is_missing(value) for value in values):
        return False
    return isinstance(infer_variable_type(values), NominalVar)



class OneHotEncoder(Transformer):
    """
    One-hot encoder for mixed numeric and nominal feature matrices.

    Options:
        nominal_columns: column positions to encode, or None to infer them
        nominal_column_values_map: ``{column: categories}``, or None to take
            the categories observed during fit
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self.nominal_columns_ = None
        self.values_map_ = None
        self.n_features_in_ = None

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "nominal_columns": None,
            "nominal_column_values_map": None,
        }

    def fit(self, X: ArrayLike, y: Optional[ArrayLike] = None) -> 'OneHotEncoder':
        """Determine the nominal columns and their categories."""
        matrix = as_matrix(X)
        self.n_features_in_ = matrix.shape[1]

        nominal_columns = self.options["nominal_columns"]
        if nominal_columns is None:
            nominal_columns = [
                column for column in range(matrix.shape[1])
                if _is_nominal(matrix[:, column])
            ]
        self.nominal_columns_ = list(nominal_columns)

        values_map = self.options["nominal_column_values_map"]
        if values_map is None:
            values_map = {}
            for column in self.nominal_columns_:
                observed = [value for value in matrix[:, column] if not is_missing(value)]
                values_map[column] = set(observed)
        self.values_map_ = {
            column: _category_order(values_map[column]) for column in self.nominal_columns_
        }

        self.logger.debug(f"Encoding nominal columns {self.nominal_columns_}")
        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        """Return the encoded float matrix."""
        self._check_is_fitted()
        matrix = as_matrix(X)
        if matrix.shape[1] != self.n_features_in_:
            raise ShapeError(
                f"OneHotEncoder was fitted on {self.n_features_in_} columns, got {matrix.shape[1]}"
            )

        blocks = []
        for column in range(matrix.shape[1]):
            values = matrix[:, column]
            if column in self.values_map_:
                categories = self.values_map_[column]
                column_values = values.astype(object)
                indicators = [column_values == category for category in categories]
                blocks.append(
                    np.column_stack(indicators).astype(float) if indicators
                    else np.zeros((len(values), 0))
                )
            else:
                blocks.append(values.astype(float).reshape(-1, 1))
        return np.hstack(blocks)
