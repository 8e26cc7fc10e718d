"""Relation validation: identifier shape, relation letters, subject != object."""

import pytest

from rebac.application.services.relation_validator import (
    validate,
    validate_access_list_inputs,
)
from rebac.domain.exceptions import ValidationException


class TestValidate:
    def test_accepts_well_formed_triple(self) -> None:
        assert validate("user:1", "owner", "doc:42") is None

    def test_accepts_ids_containing_colons(self) -> None:
        validate("user:abc:def", "viewer", "doc:x:y")

    def test_subject_without_colon_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Subject") as exc_info:
            validate("user1", "owner", "doc:42")
        assert exc_info.value.details == {"field": "subject"}
        assert exc_info.value.error_code == "VALIDATION_ERROR"

    def test_object_without_colon_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Object") as exc_info:
            validate("user:1", "owner", "doc42")
        assert exc_info.value.details == {"field": "object"}

    @pytest.mark.parametrize("relation", ["", "own3r", "owner!", "can_read", "read write", "owner\n"])
    def test_non_letter_relation_rejected(self, relation: str) -> None:
        with pytest.raises(ValidationException, match="plain string"):
            validate("user:1", relation, "doc:42")

    def test_identity_relation_rejected(self) -> None:
        with pytest.raises(ValidationException, match="different"):
            validate("user:1", "owner", "user:1")

    def test_subject_checked_before_relation(self) -> None:
        """Fails fast on the first violation in check order."""
        with pytest.raises(ValidationException) as exc_info:
            validate("user1", "bad!", "doc42")
        assert exc_info.value.details["field"] == "subject"


class TestValidateAccessListInputs:
    def test_accepts_plain_inputs(self) -> None:
        validate_access_list_inputs("user:1", "read", "doc", "documents")

    def test_quote_in_subject_rejected(self) -> None:
        with pytest.raises(ValidationException, match="not allowed") as exc_info:
            validate_access_list_inputs("user:1' OR '1'='1", "read", "doc", "documents")
        assert exc_info.value.details["field"] == "subject"

    def test_tuple_separator_in_subject_rejected(self) -> None:
        with pytest.raises(ValidationException, match="separators"):
            validate_access_list_inputs("user:1#x", "read", "doc", "documents")

    def test_action_must_be_letters(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            validate_access_list_inputs("user:1", "read;", "doc", "documents")
        assert exc_info.value.details["field"] == "action"

    def test_object_type_must_be_identifier(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            validate_access_list_inputs("user:1", "read", "doc'", "documents")
        assert exc_info.value.details["field"] == "object_type"

    def test_collection_must_be_identifier(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            validate_access_list_inputs("user:1", "read", "doc", 'documents"; DROP')
        assert exc_info.value.details["field"] == "object_type_collection"

    @pytest.mark.parametrize(
        ("args", "field"),
        [
            (("user:1", "read\n", "doc", "documents"), "action"),
            (("user:1", "read", "doc\n", "documents"), "object_type"),
            (("user:1", "read", "doc", "documents\n"), "object_type_collection"),
        ],
    )
    def test_trailing_newline_rejected(self, args: tuple[str, ...], field: str) -> None:
        with pytest.raises(ValidationException) as exc_info:
            validate_access_list_inputs(*args)
        assert exc_info.value.details["field"] == field
