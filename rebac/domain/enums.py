"""Domain enumerations for the rebac core."""

from enum import Enum


class SqlDialect(str, Enum):
    """Access-list query dialect.

    POSTGRES quotes identifiers and casts ids to text for containment;
    SQL uses bare identifiers for engines with simpler identifier rules.
    """

    POSTGRES = "postgres"
    SQL = "sql"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid dialect values as strings."""
        return [dialect.value for dialect in cls]
