"""Application services: validation, tuple codec, index builder, queries, authorization."""

from rebac.application.services.access_list_query import (
    AccessListTables,
    build_access_list_query,
    dialect_for_backend,
)
from rebac.application.services.authorization_service import AuthorizationService
from rebac.application.services.object_index_builder import (
    build_index_entries,
    build_index_entry,
)
from rebac.application.services.relation_validator import (
    validate,
    validate_access_list_inputs,
)
from rebac.application.services.tuple_codec import (
    compute_permission_tuple,
    compute_relation_tuple,
    compute_tuple,
    parse_tuple,
)

__all__ = [
    "AccessListTables",
    "AuthorizationService",
    "build_access_list_query",
    "build_index_entries",
    "build_index_entry",
    "compute_permission_tuple",
    "compute_relation_tuple",
    "compute_tuple",
    "dialect_for_backend",
    "parse_tuple",
    "validate",
    "validate_access_list_inputs",
]
