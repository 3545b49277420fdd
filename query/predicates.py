"""Predicate builder: turn search text and select values into row masks.

A predicate takes the record frame and returns a boolean Series aligned with
its index, so a single call decides membership for every record.
"""
import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Dict, Iterable, Optional

import pandas as pd

from query.config import ALL
from query.errors import MissingFieldError

logger = logging.getLogger(__name__)

Predicate = Callable[[pd.DataFrame], pd.Series]


def is_all(value: Optional[object]) -> bool:
    """True when a select value means "no restriction"."""
    return value is None or value == '' or value == ALL


@dataclass(frozen=True)
class FilterConfig:
    search_text: str = ''
    field_filters: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        if (self.search_text or '').strip():
            return True
        return any(not is_all(value) for value in self.field_filters.values())


def _constant(df: pd.DataFrame, value: bool) -> pd.Series:
    return pd.Series(value, index=df.index, dtype=bool)


def always() -> Predicate:
    def _predicate(df: pd.DataFrame) -> pd.Series:
        return _constant(df, True)
    return _predicate


def never() -> Predicate:
    def _predicate(df: pd.DataFrame) -> pd.Series:
        return _constant(df, False)
    return _predicate


def text_search(fields: Iterable[str], text: Optional[str]) -> Predicate:
    """Case-insensitive substring match against any of ``fields``.

    Blank text matches every record; surrounding whitespace is ignored.
    Null values and columns the frame does not carry never match and never
    raise.
    """
    needle = (text or '').strip().lower()
    fields = tuple(fields)
    if not needle:
        return always()

    def _predicate(df: pd.DataFrame) -> pd.Series:
        mask = _constant(df, False)
        for name in fields:
            if name not in df.columns:
                logger.debug(f"Search field '{name}' not present, skipping")
                continue
            hits = (
                df[name]
                .astype('string')
                .str.lower()
                .str.contains(needle, regex=False, na=False)
            )
            mask = mask | hits.astype(bool)
        return mask

    return _predicate


def field_equals(name: str, value: Optional[object], strict: bool = False) -> Predicate:
    """Strict equality on one field; the ``all`` sentinel matches everything."""
    if is_all(value):
        return always()

    def _predicate(df: pd.DataFrame) -> pd.Series:
        if name not in df.columns:
            if strict:
                raise MissingFieldError(name)
            logger.warning(f"Filter field '{name}' not present, no record matches")
            return _constant(df, False)
        return (df[name] == value).astype(bool)

    return _predicate


def all_of(*predicates: Predicate) -> Predicate:
    if not predicates:
        return always()

    def _predicate(df: pd.DataFrame) -> pd.Series:
        masks = [predicate(df) for predicate in predicates]
        return reduce(lambda left, right: left & right, masks)

    return _predicate


def build_predicate(schema, config: FilterConfig, strict: bool = False) -> Predicate:
    """AND of the schema's text search and every active field filter."""
    predicates = [text_search(schema.search_fields, config.search_text)]

    for name, value in config.field_filters.items():
        if is_all(value):
            continue
        if name not in schema.filter_fields:
            if strict:
                raise MissingFieldError(name, schema.domain)
            logger.warning(f"'{name}' is not a filter field of {schema.domain}, no record matches")
            predicates.append(never())
            continue
        predicates.append(field_equals(name, value, strict=strict))

    return all_of(*predicates)
