"""
Tests for the local JSON store adapter.
"""
import json
import os
from unittest.mock import patch

import pytest

from pb_portal.adapters.json_store_adapter import JsonFileStore


class TestJsonFileStore:
    """Tests for the flat key-to-array store."""

    def test_missing_key(self):
        store = JsonFileStore()
        assert store.has_key("apps") is False
        assert store.get_list("apps") == []
        assert store.get_first("portalSettings") is None

    def test_set_and_get_in_memory(self):
        store = JsonFileStore()
        store.set_list("apps", [{"id": "app_1"}])

        assert store.has_key("apps") is True
        assert store.get_list("apps") == [{"id": "app_1"}]

    def test_empty_list_still_marks_key(self):
        store = JsonFileStore()
        store.set_list("apps", [])
        assert store.has_key("apps") is True

    def test_returned_lists_are_copies(self):
        store = JsonFileStore()
        store.set_list("users", [{"uid": "u1"}])

        records = store.get_list("users")
        records[0]["uid"] = "changed"
        records.append({"uid": "u2"})

        assert store.get_list("users") == [{"uid": "u1"}]

    def test_settings_round_trip_as_single_element_array(self, tmp_path):
        path = tmp_path / "portal.json"
        store = JsonFileStore(str(path))
        store.set_list("portalSettings", [{"stage1Visible": False, "stage2Visible": True,
                                           "votingOpen": True}])

        on_disk = json.loads(path.read_text())
        assert isinstance(on_disk["portalSettings"], list)
        assert len(on_disk["portalSettings"]) == 1

        reopened = JsonFileStore(str(path))
        assert reopened.get_first("portalSettings") == {
            "stage1Visible": False, "stage2Visible": True, "votingOpen": True}

    def test_persists_between_instances(self, tmp_path):
        path = str(tmp_path / "portal.json")
        JsonFileStore(path).set_list("scores", [{"appId": "a", "scorerId": "b"}])

        assert JsonFileStore(path).get_list("scores") == [{"appId": "a", "scorerId": "b"}]
        # No temp files left behind
        assert [p.name for p in tmp_path.iterdir()] == ["portal.json"]

    def test_failed_open_releases_temp_file(self, tmp_path):
        path = tmp_path / "portal.json"
        store = JsonFileStore(str(path))

        with patch("pb_portal.adapters.json_store_adapter.os.fdopen",
                   side_effect=OSError("no handles")), \
                patch("pb_portal.adapters.json_store_adapter.os.close",
                      wraps=os.close) as close:
            with pytest.raises(OSError):
                store.set_list("apps", [{"id": "app_1"}])

        close.assert_called_once()
        assert list(tmp_path.iterdir()) == []

    def test_failed_write_keeps_previous_file(self, tmp_path):
        path = tmp_path / "portal.json"
        store = JsonFileStore(str(path))
        store.set_list("apps", [{"id": "app_1"}])

        with patch("pb_portal.adapters.json_store_adapter.json.dump",
                   side_effect=TypeError("not serializable")):
            with pytest.raises(TypeError):
                store.set_list("apps", [{"id": "app_2"}])

        assert json.loads(path.read_text()) == {"apps": [{"id": "app_1"}]}
        assert [p.name for p in tmp_path.iterdir()] == ["portal.json"]
