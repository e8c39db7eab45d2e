"""Tests for the Prospect data model."""

import dataclasses
import uuid

import pytest

from hot_prospects.models import DEFAULT_NAME, Prospect, new_prospect_id


class TestProspect:
    """Test Prospect dataclass."""

    def test_defaults(self):
        """A bare prospect gets the placeholder name and is uncontacted."""
        prospect = Prospect()

        assert prospect.name == DEFAULT_NAME == "Anonymous"
        assert prospect.email_address == ""
        assert prospect.is_contacted is False
        assert uuid.UUID(prospect.id)

    def test_ids_are_unique(self):
        ids = {Prospect().id for _ in range(100)}
        assert len(ids) == 100

    def test_is_immutable(self):
        """Nobody outside the store can flip the flag in place."""
        prospect = Prospect(name="Paul Hudson")

        with pytest.raises(dataclasses.FrozenInstanceError):
            prospect.is_contacted = True

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Prospect(id="")

    def test_equality_includes_id(self):
        """Same data under different ids are different records."""
        first = Prospect(name="Paul Hudson", email_address="paul@hackingwithswift.com")
        second = Prospect(name="Paul Hudson", email_address="paul@hackingwithswift.com")

        assert first != second
        assert first == dataclasses.replace(first)

    def test_status_label(self):
        assert Prospect().status_label == "uncontacted"
        assert Prospect(is_contacted=True).status_label == "contacted"

    def test_new_prospect_id_format(self):
        prospect_id = new_prospect_id()

        assert str(uuid.UUID(prospect_id)) == prospect_id
        assert uuid.UUID(prospect_id).version == 4
