"""Query facade: filter a record frame and compute its named stats in one call."""
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

import pandas as pd

from query.errors import DivisionByZeroError, MissingFieldError
from query.filtering import apply_filter
from query.predicates import FilterConfig, build_predicate
from query.schema import RecordSchema

logger = logging.getLogger(__name__)

SCOPE_ALL = 'all'
SCOPE_VISIBLE = 'visible'


@dataclass(frozen=True)
class Stat:
    compute: Callable[[pd.DataFrame], Any]
    scope: str = SCOPE_ALL
    default: Any = 0


def compute_stats(
    records: pd.DataFrame,
    visible: pd.DataFrame,
    stats: Mapping[str, Stat],
    domain: str = 'records',
) -> Dict[str, Any]:
    results: Dict[str, Any] = {}
    for name, stat in stats.items():
        source = visible if stat.scope == SCOPE_VISIBLE else records
        try:
            results[name] = stat.compute(source)
        except (DivisionByZeroError, MissingFieldError) as e:
            logger.warning(f"Stat '{name}' for {domain} fell back to {stat.default!r}: {e}")
            results[name] = stat.default
    return results


def run_query(
    records: pd.DataFrame,
    schema: RecordSchema,
    config: Optional[FilterConfig] = None,
    stats: Optional[Mapping[str, Stat]] = None,
    strict: bool = False,
) -> Dict[str, Any]:
    """Filter ``records`` with ``config`` and compute ``stats``.

    Args:
        records: record frame, typically from ``RecordSchema.to_frame``
        schema: descriptor naming the searchable and filterable fields
        config: current search text and select values; ``None`` means no filter
        stats: named aggregates, each computed over the full set or the
            visible subset depending on its scope
        strict: raise ``MissingFieldError`` for unknown filter fields instead
            of matching nothing

    Returns:
        Dict with ``visible`` (filtered rows, input order), ``stats``,
        ``total`` (size of the full set) and ``filtered`` (whether any
        filter was active).

    The input frame is never modified.
    """
    config = config or FilterConfig()
    started = time.perf_counter()

    predicate = build_predicate(schema, config, strict=strict)
    visible = apply_filter(records, predicate)
    stat_values = compute_stats(records, visible, stats or {}, schema.domain)

    logger.debug(
        f"{schema.domain} query: {len(visible)}/{len(records)} rows, "
        f"{len(stat_values)} stats in {(time.perf_counter() - started) * 1000:.1f} ms"
    )

    return {
        'visible': visible,
        'stats': stat_values,
        'total': int(len(records)),
        'filtered': config.is_active,
    }
