# ==============================================
# QueryEngine
# ==============================================
#
# PURPOSE:
#   Builds filter and ordering specifications for the vault's
#   read paths (search by name, search by id, sort) and runs
#   them through the RecordStore.
#
# CLASS: QueryEngine
# ------------------
#   Stateless apart from the store reference.
#
#   Methods:
#   --------
#   - search(mode, term) -> list[Record]
#       mode is a SearchMode or its string value ("name" / "id").
#         BY_NAME → case-insensitive substring match on name,
#                   creation order.
#         BY_ID   → exact match; [] when the id is well-formed
#                   but unknown.
#       Raises ValidationError for a blank term,
#       InvalidIdError for a malformed id.
#
#   - sort(field, direction) -> list[Record]
#       field: SortField / "name" / "createdAt"
#       direction: SortDirection / "asc" / "desc"
#       Raises InvalidSelectionError before querying.
#
#   Spec builders (pure):
#   ---------------------
#   - name_filter(term) -> dict
#   - sort_spec(field, direction) -> list[tuple[str, int]]
#
# ==============================================

import re
from typing import Any, Dict, List, Tuple

from record_vault.errors import NotFoundError, ValidationError
from record_vault.query.selection import SearchMode, SortDirection, SortField
from record_vault.storage.record import Record
from record_vault.storage.record_store import CREATION_ORDER, RecordStore


def name_filter(term: str) -> Dict[str, Any]:
    # The term is matched literally, not as a regular expression.
    return {"name": {"$regex": re.escape(term), "$options": "i"}}


def sort_spec(field, direction) -> List[Tuple[str, int]]:
    """
    Ordering for a sort request, with a tie-breaker so equal
    keys always come back in the same order.

    Raises:
        InvalidSelectionError: Unknown field or direction
    """
    field = SortField.parse(field)
    direction = SortDirection.parse(direction)
    order = direction.pymongo_order

    if field is SortField.NAME:
        return [("name", order), ("createdAt", order), ("_id", order)]
    return [("createdAt", order), ("_id", order)]


class QueryEngine:
    def __init__(self, store: RecordStore):
        self.store = store

    def search(self, mode, term: str) -> List[Record]:
        mode = SearchMode.parse(mode)
        term = (term or "").strip()

        if mode is SearchMode.BY_NAME:
            if not term:
                raise ValidationError("Search term is required.")
            return self.store.find(name_filter(term), CREATION_ORDER)

        if not term:
            raise ValidationError("ID is required.")
        try:
            return [self.store.find_by_id(term)]
        except NotFoundError:
            return []

    def sort(self, field, direction) -> List[Record]:
        return self.store.list_all(sort_spec(field, direction))
