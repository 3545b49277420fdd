"""Record descriptors: which model backs a collection and how it is searched."""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Tuple, Type, Union, get_args, get_origin

import pandas as pd
from pydantic import BaseModel

from query.errors import DuplicateRecordError, MissingFieldError

logger = logging.getLogger(__name__)


def _literal_values(annotation) -> List[object]:
    origin = get_origin(annotation)
    if origin is Literal:
        return list(get_args(annotation))
    if origin is Union:
        # Optional[Literal[...]]
        for arg in get_args(annotation):
            values = _literal_values(arg)
            if values:
                return values
    return []


def _is_optional_int(annotation) -> bool:
    if get_origin(annotation) is not Union:
        return False
    args = get_args(annotation)
    return type(None) in args and int in args


@dataclass(frozen=True)
class RecordSchema:
    domain: str
    model: Type[BaseModel]
    id_field: Optional[str] = 'id'
    search_fields: Tuple[str, ...] = ()
    filter_fields: Tuple[str, ...] = ()

    @property
    def fields(self) -> List[str]:
        return list(self.model.model_fields)

    def has_field(self, field: str) -> bool:
        return field in self.model.model_fields

    def choices(self, field: str) -> List[object]:
        """Closed set of values a categorical field may take, in declaration order.

        Open fields (plain ``str``) return an empty list; use
        ``query.filtering.distinct_values`` to derive their options from data.
        """
        if not self.has_field(field):
            raise MissingFieldError(field, self.domain)
        return _literal_values(self.model.model_fields[field].annotation)

    def to_frame(self, rows: Iterable[object]) -> pd.DataFrame:
        """Validate ``rows`` against the model and load them into a DataFrame.

        Rows may be model instances or plain mappings. Every model field becomes
        a column, so absent optional values show up as nulls rather than as
        missing columns. Row order is preserved.
        """
        records = [
            row if isinstance(row, self.model) else self.model.model_validate(row)
            for row in rows
        ]

        if self.id_field:
            seen = set()
            duplicates = []
            for record in records:
                key = getattr(record, self.id_field)
                if key in seen:
                    duplicates.append(key)
                seen.add(key)
            if duplicates:
                raise DuplicateRecordError(self.domain, duplicates)

        df = pd.DataFrame([record.model_dump() for record in records], columns=self.fields)
        # Nullable integers stay integers instead of widening to float64
        for name, info in self.model.model_fields.items():
            if _is_optional_int(info.annotation):
                df[name] = df[name].astype('Int64')
        logger.debug(f"Loaded {len(df)} {self.domain} records")
        return df
