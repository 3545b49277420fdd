import logging
from typing import List, Optional

import pandas as pd

from query.config import TIME_RANGES
from query.errors import MissingFieldError
from query.predicates import Predicate

logger = logging.getLogger(__name__)


def apply_filter(records: pd.DataFrame, predicate: Predicate) -> pd.DataFrame:
    """Rows of ``records`` matching ``predicate``, in input order.

    The original index is kept so the result can be traced back to the input.
    """
    if records.empty:
        return records.copy()
    mask = predicate(records)
    result = records.loc[mask.to_numpy(dtype=bool)].copy()
    logger.debug(f"Filter kept {len(result)} of {len(records)} rows")
    return result


def distinct_values(records: pd.DataFrame, field: str) -> List[object]:
    """Unique non-null values of ``field`` in first-seen order."""
    if field not in records.columns:
        raise MissingFieldError(field)
    return records[field].dropna().drop_duplicates().tolist()


def periods_for(time_range: Optional[str]) -> Optional[int]:
    if time_range in TIME_RANGES:
        return TIME_RANGES[time_range]
    return None


def trailing(records: pd.DataFrame, periods: Optional[int]) -> pd.DataFrame:
    """Last ``periods`` rows in order; ``None`` keeps every row."""
    if periods is None:
        return records.copy()
    periods = max(0, int(periods))
    if periods == 0:
        return records.iloc[0:0].copy()
    return records.tail(periods).copy()
