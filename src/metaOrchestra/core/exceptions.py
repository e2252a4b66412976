"""
Exception hierarchy for metaOrchestra.

All errors signal programmer or configuration mistakes and are raised to the
caller unchanged.
"""


class MetaOrchestraError(Exception):
    """Base class for all metaOrchestra errors."""


class InferenceError(MetaOrchestraError, ValueError):
    """A variable type cannot be inferred from the given values."""


class UnsupportedMetricError(MetaOrchestraError, ValueError):
    """An unknown scoring metric was requested."""


class NotFittedError(MetaOrchestraError, ValueError):
    """A transformer was used before ``fit`` was called."""


class ShapeError(MetaOrchestraError, ValueError):
    """Input shape disagrees with what the transformer expects."""


class EmptyEnsembleError(MetaOrchestraError, ValueError):
    """An ensemble has no child learners."""


class FoldCountError(MetaOrchestraError, ValueError):
    """The requested number of folds is non-positive or exceeds the instance count."""


class FitError(MetaOrchestraError, RuntimeError):
    """A backend failed while fitting; the native error is chained as ``__cause__``."""
