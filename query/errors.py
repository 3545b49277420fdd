"""Error taxonomy for record queries."""


class QueryError(Exception):
    """Base class for query engine errors."""


class DivisionByZeroError(QueryError, ZeroDivisionError):
    """A ratio was requested with a zero denominator under the raise policy."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: denominator is zero")


class MissingFieldError(QueryError, KeyError):
    """A selector or filter names a field the records do not carry."""

    def __init__(self, field: str, domain: str = 'records'):
        self.field = field
        self.domain = domain
        super().__init__(f"{domain} has no field '{field}'")

    def __str__(self) -> str:
        return self.args[0]


class DuplicateRecordError(QueryError, ValueError):
    """Two records in one collection share an identifier."""

    def __init__(self, domain: str, ids):
        self.domain = domain
        self.ids = list(ids)
        super().__init__(f"{domain} has duplicate ids: {', '.join(map(str, self.ids))}")
