# ==============================================
# Selections (Enums)
# ==============================================
#
# PURPOSE:
#   The closed sets of choices a caller can make when
#   searching or sorting. Each enum parses caller strings
#   and rejects anything else with InvalidSelectionError,
#   before any query is run.
#
# ENUMS:
# ------
# - SearchMode(Enum): BY_NAME ("name"), BY_ID ("id")
# - SortField(Enum): NAME ("name"), CREATED_AT ("createdAt")
# - SortDirection(Enum): ASC ("asc"), DESC ("desc")
#
# ==============================================

from enum import Enum

from pymongo import ASCENDING, DESCENDING

from record_vault.errors import InvalidSelectionError


class _Selection(Enum):
    """Enum that parses its own values (or members) from caller input."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        raise InvalidSelectionError(cls._kind(), value)

    @classmethod
    def _kind(cls) -> str:
        return cls.__name__


class SearchMode(_Selection):
    BY_NAME = "name"
    BY_ID = "id"

    @classmethod
    def _kind(cls) -> str:
        return "search mode"


class SortField(_Selection):
    NAME = "name"
    CREATED_AT = "createdAt"

    @classmethod
    def _kind(cls) -> str:
        return "sort field"


class SortDirection(_Selection):
    ASC = "asc"
    DESC = "desc"

    @property
    def pymongo_order(self) -> int:
        return ASCENDING if self is SortDirection.ASC else DESCENDING

    @classmethod
    def _kind(cls) -> str:
        return "sort direction"
