"""Tests for the whole-state snapshot file."""

import json
from pathlib import Path

from imara.db.models import AppState, User
from imara.db.snapshot import SnapshotStore
from imara.gamification.seed import seed_catalog


class TestLoad:
    def test_missing_file_gives_default_catalog(self, tmp_path: Path):
        state = SnapshotStore(tmp_path / "data.json").load()
        assert len(state.achievements) == 5
        assert {c.id for c in state.challenges} == {"hydration_7", "gratitude_week"}
        assert state.users == []
        assert state.checkins == []

    def test_corrupt_file_is_kept_aside(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("{not json")

        state = SnapshotStore(path).load()

        assert len(state.achievements) == 5
        assert not path.exists()
        quarantined = list(tmp_path.glob("data.json.corrupt-*"))
        assert len(quarantined) == 1
        assert quarantined[0].read_text() == "{not json"

    def test_invalid_document_is_kept_aside(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"users": [{"email": "missing-fields"}]}))

        state = SnapshotStore(path).load()

        assert state.users == []
        assert list(tmp_path.glob("data.json.corrupt-*"))

    def test_catalog_reseeded_on_load(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"achievements": [], "challenges": []}))

        state = SnapshotStore(path).load()

        assert len(state.achievements) == 5
        assert len(state.challenges) == 2


class TestSave:
    def test_round_trip_uses_camel_case(self, tmp_path: Path):
        path = tmp_path / "data.json"
        store = SnapshotStore(path)
        state = store.load()
        state.users.append(User(email="a@example.com", username="a", name="A", password_hash="h"))

        assert store.save(state) is True

        raw = json.loads(path.read_text())
        assert "habitCompletions" in raw
        assert "lastSave" in raw and raw["lastSave"] is not None
        assert raw["users"][0]["passwordHash"] == "h"
        assert raw["users"][0]["streak"]["lastCheckInDate"] is None
        assert not store.tmp_path.exists()

        reloaded = store.load()
        assert reloaded.users[0].email == "a@example.com"
        assert reloaded.last_save is not None

    def test_save_failure_returns_false(self, tmp_path: Path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = SnapshotStore(blocker / "data.json")

        assert store.save(AppState()) is False

    def test_seed_is_idempotent(self):
        state = AppState()
        seed_catalog(state)
        seed_catalog(state)
        assert len(state.achievements) == 5
        assert len(state.challenges) == 2
