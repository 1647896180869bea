"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix warnings without
catching all UserWarning.

Keep this module lightweight to avoid import cycles.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixConditionWarning(CacheMatrixWarning):
    """The solved matrix is ill-conditioned; the result may be inaccurate."""
