"""Reducers over record frames: counts, sums, averages and growth percentages.

Every ratio here has a zero-denominator policy instead of letting NaN or inf
reach the dashboard:

* ``ZeroPolicy.RAISE`` raises ``DivisionByZeroError``
* ``ZeroPolicy.ZERO`` returns ``0.0``
* ``ZeroPolicy.NONE`` returns ``None`` (rendered as "n/a")

When no policy is passed the configured default (``DASHBOARD_ZERO_POLICY``)
applies.
"""
import logging
from enum import Enum
from typing import Callable, Optional, Union

import pandas as pd
import polars as pl

from query.config import ZERO_POLICY
from query.errors import DivisionByZeroError, MissingFieldError
from query.predicates import Predicate

logger = logging.getLogger(__name__)

Selector = Union[str, Callable[[pd.DataFrame], pd.Series]]


class ZeroPolicy(str, Enum):
    RAISE = 'raise'
    ZERO = 'zero'
    NONE = 'none'


def resolve_policy(policy: Optional[Union[str, ZeroPolicy]] = None) -> ZeroPolicy:
    if policy is None:
        policy = ZERO_POLICY
    try:
        return ZeroPolicy(policy)
    except ValueError:
        logger.warning(f"Unknown zero policy '{policy}', using '{ZeroPolicy.ZERO.value}'")
        return ZeroPolicy.ZERO


def _on_zero(operation: str, policy) -> Optional[float]:
    policy = resolve_policy(policy)
    if policy is ZeroPolicy.RAISE:
        raise DivisionByZeroError(operation)
    if policy is ZeroPolicy.NONE:
        return None
    return 0.0


def select(records: pd.DataFrame, selector: Selector) -> pd.Series:
    """Numeric Series picked by a column name or computed by a function.

    Nulls and non-numeric values count as 0.
    """
    return _numeric(records, selector).fillna(0)


def _numeric(records: pd.DataFrame, selector: Selector) -> pd.Series:
    if callable(selector):
        try:
            values = selector(records)
        except MissingFieldError:
            raise
        except KeyError as e:
            raise MissingFieldError(str(e.args[0]) if e.args else '?') from e
    else:
        if selector not in records.columns:
            raise MissingFieldError(selector)
        values = records[selector]
    return pd.to_numeric(values, errors='coerce')


def count(records: pd.DataFrame, predicate: Optional[Predicate] = None) -> int:
    if predicate is None:
        return int(len(records))
    if records.empty:
        return 0
    return int(predicate(records).sum())


def total(records: pd.DataFrame, selector: Selector) -> float:
    if records.empty:
        return 0.0
    return float(select(records, selector).sum())


def average(records: pd.DataFrame, selector: Selector, policy=None) -> Optional[float]:
    """Mean over the records that carry a value; nulls are skipped, not zeroed."""
    if records.empty:
        return _on_zero('average', policy)
    values = _numeric(records, selector).dropna()
    if values.empty:
        return _on_zero('average', policy)
    return float(values.mean())


def percent_delta(current: float, previous: float, policy=None) -> Optional[float]:
    """``(current - previous) / previous * 100``.

    A missing ``current`` is treated like a zero ``previous``.
    """
    if current is None or pd.isna(current):
        return _on_zero('percent_delta', policy)
    if previous is None or pd.isna(previous) or previous == 0:
        return _on_zero('percent_delta', policy)
    return float((current - previous) / previous * 100)


def period_over_period(records: pd.DataFrame, selector: Selector, policy=None) -> Optional[float]:
    """Percent delta between the last two rows of an ordered period series."""
    if len(records) < 2:
        return _on_zero('period_over_period', policy)
    values = select(records, selector)
    return percent_delta(values.iloc[-1], values.iloc[-2], policy)


def share_of_max(records: pd.DataFrame, selector: Selector) -> pd.Series:
    """Each value as a percentage of the series maximum."""
    if records.empty:
        return pd.Series([], index=records.index, dtype='float64')
    values = select(records, selector).astype('float64')
    peak = values.max()
    if peak <= 0:
        return pd.Series(0.0, index=records.index, dtype='float64')
    return values / peak * 100


def group_totals(records: pd.DataFrame, by: str, value: str) -> pd.DataFrame:
    """Sum of ``value`` per ``by`` group, largest first, with each group's share."""
    for name in (by, value):
        if name not in records.columns:
            raise MissingFieldError(name)

    if records.empty:
        return pd.DataFrame(columns=[by, value, 'share'])

    df_pl = pl.DataFrame({
        by: records[by].fillna('Unknown').astype(str).tolist(),
        value: select(records, value).astype('float64').tolist(),
    })

    grouped = (
        df_pl
        .group_by(by)
        .agg(pl.col(value).sum())
        .sort([value, by], descending=[True, False])
    )

    grand_total = grouped[value].sum()
    if grand_total:
        grouped = grouped.with_columns((pl.col(value) / grand_total * 100).alias('share'))
    else:
        grouped = grouped.with_columns(pl.lit(0.0).alias('share'))

    return pd.DataFrame(grouped.to_dict(as_series=False), columns=[by, value, 'share'])
