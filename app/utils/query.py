# app/utils/query.py
from typing import Any, Dict, Iterable, Optional

# Filter values that mean "do not constrain this field"
UNSET_VALUES = ("all", "")


class QueryBuilder:
    """Compose a Mongo filter from optional equality predicates.

    Each call to `where` adds a constraint only when a real value was given,
    so callers can pass request parameters straight through:

        QueryBuilder().where("name", filter_name).where("monthAndYear", period).build()
    """

    def __init__(self, unset_values: Iterable[str] = UNSET_VALUES):
        self._unset = {value.lower() for value in unset_values}
        self._filters: Dict[str, Any] = {}

    def _is_unset(self, value: Any) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and value.strip().lower() in self._unset

    def where(self, field: str, value: Optional[Any]) -> "QueryBuilder":
        if not self._is_unset(value):
            self._filters[field] = value
        return self

    def build(self) -> Dict[str, Any]:
        return dict(self._filters)
