"""
Unit tests for the Application record.
"""

import dataclasses

import pytest

from gobench_client.models import Application, ApplicationStatus


class TestApplicationFromDict:
    def test_known_fields(self):
        app = Application.from_dict({
            "id": 7,
            "name": "load-test",
            "status": "running",
            "scenario": "package main",
            "created_at": "2024-03-05T10:07:09Z",
            "updated_at": "2024-03-05T10:08:00Z",
            "tags": "nightly",
        })

        assert app.id == 7
        assert app.name == "load-test"
        assert app.scenario == "package main"
        assert app.state is ApplicationStatus.RUNNING
        assert app.created_at == "2024-03-05T10:07:09Z"
        assert app.tags == "nightly"
        assert app.extra == {}

    def test_unknown_fields_are_preserved(self):
        app = Application.from_dict({"id": 1, "name": "a", "edges": {"groups": []}})
        assert app.extra == {"edges": {"groups": []}}
        assert app.to_dict()["edges"] == {"groups": []}

    def test_missing_optional_fields(self):
        app = Application.from_dict({"name": "a"})
        assert app.id is None
        assert app.scenario == ""
        assert app.status is None
        assert app.tags == ""

    def test_to_dict_round_trip(self):
        data = {
            "id": 3, "name": "x", "scenario": "s", "status": "pending",
            "created_at": None, "updated_at": None, "tags": "",
        }
        assert Application.from_dict(data).to_dict() == data


class TestApplicationState:
    @pytest.mark.parametrize("status,active", [
        ("pending", True),
        ("provisioning", True),
        ("running", True),
        ("finished", False),
        ("cancel", False),
        ("error", False),
    ])
    def test_is_active(self, status, active):
        assert Application(name="a", status=status).is_active is active

    def test_unknown_status_is_kept_verbatim(self):
        app = Application(name="a", status="paused")
        assert app.status == "paused"
        assert app.state is None
        assert app.is_active is False

    def test_records_are_immutable(self):
        app = Application(name="a", id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            app.name = "b"

    def test_str(self):
        assert str(Application(name="a", id=1)) == "a (1)"
        assert str(Application(name="a")) == "a"

    def test_records_are_hashable(self):
        assert len({Application(name="a", id=1), Application(name="a", id=1)}) == 1
