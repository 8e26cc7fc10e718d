"""Tests for domain value objects (Identifier, EntityRef, CacheLookup)."""

import pytest

from rebac.domain.exceptions import ValidationException
from rebac.domain.value_objects.core import (
    ANY_ENTITY,
    AnyEntity,
    CacheLookup,
    Identifier,
    SpecificEntity,
)


class TestIdentifier:
    """Identifier: split on the first colon only."""

    def test_splits_on_first_colon(self) -> None:
        ident = Identifier.parse("user:abc:def")
        assert ident.type == "user"
        assert ident.id == "abc:def"

    def test_str_round_trips(self) -> None:
        assert str(Identifier.parse("doc:42")) == "doc:42"

    def test_empty_id_allowed(self) -> None:
        assert Identifier.parse("doc:") == Identifier(type="doc", id="")

    def test_missing_colon_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Object must be") as exc_info:
            Identifier.parse("doc42", field="object")
        assert exc_info.value.details == {"field": "object"}


class TestEntityRef:
    def test_specific_entity_columns(self) -> None:
        entity = SpecificEntity(identifier=Identifier("doc", "42"), role="owner")
        assert entity.key == "doc:42#owner"
        assert entity.entity_id == "42"
        assert entity.entity_type == "doc"
        assert entity.relation == "owner"
        assert entity.is_wildcard is False

    def test_any_entity_renders_wildcard(self) -> None:
        assert ANY_ENTITY.key == "*"
        assert ANY_ENTITY.entity_id == "*"
        assert ANY_ENTITY.entity_type == "*"
        assert ANY_ENTITY.relation == "*"
        assert ANY_ENTITY.is_wildcard is True
        assert AnyEntity() == ANY_ENTITY


class TestCacheLookup:
    """Miss is distinct from Hit(False)."""

    def test_hit_true(self) -> None:
        lookup = CacheLookup.hit(True)
        assert lookup.is_hit and lookup.decision is True

    def test_hit_false_is_not_miss(self) -> None:
        lookup = CacheLookup.hit(False)
        assert lookup.is_hit
        assert not lookup.is_miss
        assert lookup.decision is False
        assert lookup != CacheLookup.miss()

    def test_miss_has_no_decision(self) -> None:
        lookup = CacheLookup.miss()
        assert lookup.is_miss
        assert lookup.decision is None
