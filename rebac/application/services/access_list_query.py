"""Access-list query generation for SQL backends.

Builds the text of a query returning every row of an object collection a
subject may perform an action on. Reachability is the union of:

1. index-reachable objects: the subject of object-index rows for
   (object_type, action) whose entity matches one of the subject's
   actor-index entities, or whose entity is the wildcard;
2. direct permission tuples whose computedTuple starts with computed_tuple.

Rows of the collection are kept when their _id is contained in a reachable
value. Both dialects produce the same logical result.

The builder is a pure string template: there is no parameter binding and no
escaping. Every input must pass validate_access_list_inputs (and
computed_tuple must be built from validated parts) before reaching it.
"""

from dataclasses import dataclass

from rebac.core.constants import (
    DEFAULT_ACTOR_INDEX_TABLE,
    DEFAULT_OBJECT_INDEX_TABLE,
    DEFAULT_PERMISSION_TABLE,
    WILDCARD,
)
from rebac.domain.enums import SqlDialect
from rebac.domain.exceptions import UnsupportedDialectException
from rebac.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccessListTables:
    """Names of the three materialized relations the query reads."""

    actor_index: str = DEFAULT_ACTOR_INDEX_TABLE
    object_index: str = DEFAULT_OBJECT_INDEX_TABLE
    permission: str = DEFAULT_PERMISSION_TABLE


DEFAULT_TABLES = AccessListTables()


def _postgres_query(
    tables: AccessListTables,
    object_type_collection: str,
    computed_tuple: str,
    subject: str,
    object_type: str,
    action: str,
) -> str:
    return f"""
SELECT s.*
FROM "{object_type_collection}" AS s
         INNER JOIN ((SELECT obj.subject AS entity
                      FROM (SELECT *
                            FROM "{tables.actor_index}"
                            WHERE subject = '{subject}') AS actors
                               INNER JOIN (SELECT *
                                           FROM "{tables.object_index}"
                                           WHERE "subjectType" = '{object_type}'
                                             AND "subjectPermission" = '{action}') AS obj
                                          ON actors.entity = obj.entity OR obj.entity = '{WILDCARD}')
                     UNION
                     (SELECT "computedTuple"
                      FROM "{tables.permission}"
                      WHERE "computedTuple" LIKE '{computed_tuple}%')) AS idx
                    ON idx.entity LIKE '%' || CAST(s."_id" AS TEXT) || '%'
"""


def _sql_query(
    tables: AccessListTables,
    object_type_collection: str,
    computed_tuple: str,
    subject: str,
    object_type: str,
    action: str,
) -> str:
    # UNION members are not parenthesized: SQLite rejects parenthesized selects.
    return f"""
SELECT s.*
FROM {object_type_collection} AS s
         INNER JOIN (SELECT obj.subject AS entity
                     FROM (SELECT *
                           FROM {tables.actor_index}
                           WHERE subject = '{subject}') AS actors
                              INNER JOIN (SELECT *
                                          FROM {tables.object_index}
                                          WHERE subjectType = '{object_type}'
                                            AND subjectPermission = '{action}') AS obj
                                         ON actors.entity = obj.entity OR obj.entity = '{WILDCARD}'
                     UNION
                     SELECT computedTuple
                     FROM {tables.permission}
                     WHERE computedTuple LIKE '{computed_tuple}%') AS idx
                    ON idx.entity LIKE '%' || s._id || '%'
"""


_BUILDERS = {
    SqlDialect.POSTGRES: _postgres_query,
    SqlDialect.SQL: _sql_query,
}


def build_access_list_query(
    dialect: SqlDialect | str,
    object_type_collection: str,
    computed_tuple: str,
    subject: str,
    object_type: str,
    action: str,
    *,
    tables: AccessListTables = DEFAULT_TABLES,
) -> str:
    """Return the access-list query text for the given dialect.

    Inputs are interpolated verbatim. Callers must validate them first
    (see relation_validator.validate_access_list_inputs); this function
    offers no protection against injected values.

    Containment is a substring match on the reachable value. An id that is a
    substring of another id matches both, and a direct tuple matches on any
    part of its text: _id "1" matches "user:1#read@doc:5" via the subject.
    Rows are not de-duplicated.

    Args:
        dialect: SqlDialect (or its string value).
        object_type_collection: Table holding the objects (rows keyed by _id).
        computed_tuple: Tuple prefix matched against permission rows.
        subject: Actor identifier (e.g. 'user:1').
        object_type: Object type filtered in the object index (e.g. 'doc').
        action: Permission filtered in the object index (e.g. 'read').
        tables: Names of the actor index, object index and permission tables.

    Returns:
        Query text selecting all matching collection rows.

    Raises:
        UnsupportedDialectException: If dialect is not a known SqlDialect.
    """
    try:
        resolved = SqlDialect(dialect)
    except ValueError as e:
        raise UnsupportedDialectException(str(dialect)) from e
    query = _BUILDERS[resolved](
        tables, object_type_collection, computed_tuple, subject, object_type, action
    )
    logger.debug(
        "Built %s access-list query for %s on %s (%s)",
        resolved.value,
        subject,
        object_type_collection,
        action,
    )
    return query


def dialect_for_backend(backend_name: str) -> SqlDialect:
    """Map a SQLAlchemy dialect name to the query dialect.

    'postgresql' (and 'postgres') use quoted identifiers; everything else
    uses the bare-identifier form.
    """
    if backend_name in ("postgresql", "postgres"):
        return SqlDialect.POSTGRES
    return SqlDialect.SQL
