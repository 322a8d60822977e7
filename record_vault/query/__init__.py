# ==============================================
# QUERY (Search + Sort)
# ==============================================
#
# Modules:
# --------
# - selection.py     → SearchMode / SortField / SortDirection enums
# - query_engine.py  → Filter/ordering builders and QueryEngine
#
# ==============================================

from .selection import SearchMode, SortDirection, SortField
from .query_engine import QueryEngine, name_filter, sort_spec

__all__ = [
    "QueryEngine",
    "SearchMode",
    "SortDirection",
    "SortField",
    "name_filter",
    "sort_spec",
]
