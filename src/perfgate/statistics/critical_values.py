"""
Student's-t critical values.

The bucketed table reproduces the thresholds existing baselines were judged
against. The exact method asks scipy for the two-tailed quantile instead and
is more accurate at degrees of freedom the table does not tabulate.
"""

from scipy import stats

from ..core.config import CriticalValueMethod, coerce_method

# (min_df, critical value) in descending df order, per confidence level
_T_TABLE: dict[float, tuple[tuple[int, float], ...]] = {
    0.95: ((30, 1.96), (10, 2.228), (5, 2.571), (0, 2.776)),
    0.99: ((30, 2.576), (10, 3.169), (5, 4.032), (0, 4.604)),
}


def _table_lookup(degrees_of_freedom: int, confidence_level: float) -> float:
    # Highest tabulated level not above the requested one; below 0.95 use 0.95.
    table = _T_TABLE[0.95]
    for level in sorted(_T_TABLE):
        if confidence_level >= level - 1e-9:
            table = _T_TABLE[level]

    for min_df, value in table:
        if degrees_of_freedom >= min_df:
            return value
    return table[-1][1]


def critical_value(
    degrees_of_freedom: int,
    confidence_level: float,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
) -> float:
    """
    Two-tailed Student's-t critical value.

    Args:
        degrees_of_freedom: Degrees of freedom; values below 1 use the widest bucket
        confidence_level: Confidence level, e.g. 0.95. The table supports 0.95 and
            0.99; other levels use the highest tabulated level at or below them
            (0.95 for anything under 0.99), so a stricter level is never looser.
        method: ``"table"`` or ``"exact"``

    Returns:
        Critical value, larger for smaller df and for higher confidence
    """
    method = coerce_method(method)
    df = int(degrees_of_freedom)

    if method is CriticalValueMethod.TABLE:
        return _table_lookup(df, confidence_level)

    tail = (1.0 - confidence_level) / 2.0
    return float(stats.t.ppf(1.0 - tail, max(df, 1)))


__all__ = ["critical_value"]
