"""Tests for core task logic."""

import json

import pytest

from tasktogo.core.tasks import (
    Task,
    TaskDecodeError,
    decode_tasks,
    encode_tasks,
    find_index,
    remove_at,
    remove_selected,
)


@pytest.fixture
def sample_tasks():
    """Sample tasks covering flag combinations."""
    return [
        Task(id="a", title="Buy milk"),
        Task(id="b", title="Walk dog", is_completed=True),
        Task(id="c", title="Call mom", is_selected=True),
        Task(id="d", title="Pay rent", is_completed=True, is_selected=True),
    ]


class TestTask:
    def test_defaults(self):
        task = Task(title="Buy milk")
        assert task.title == "Buy milk"
        assert task.is_completed is False
        assert task.is_selected is False
        assert task.id

    def test_fresh_ids_are_unique(self):
        ids = {Task(title="x").id for _ in range(200)}
        assert len(ids) == 200

    def test_equality_is_by_id(self):
        assert Task(id="1", title="One") == Task(id="1", title="Other", is_completed=True)
        assert Task(id="1", title="Same") != Task(id="2", title="Same")

    def test_to_dict_uses_wire_names(self):
        task = Task(id="1", title="Test", is_completed=True)
        assert task.to_dict() == {
            "id": "1",
            "title": "Test",
            "isCompleted": True,
            "isSelected": False,
        }

    def test_from_dict(self):
        task = Task.from_dict({"id": "1", "title": "Test", "isCompleted": False, "isSelected": True})
        assert task.id == "1"
        assert task.is_selected is True
        assert task.is_completed is False


class TestEncodeDecode:
    def test_round_trip_preserves_everything(self, sample_tasks):
        decoded = decode_tasks(encode_tasks(sample_tasks))
        assert [t.to_dict() for t in decoded] == [t.to_dict() for t in sample_tasks]

    def test_encodes_non_ascii_titles(self):
        raw = encode_tasks([Task(id="1", title="Café ☕")])
        assert "Café ☕" in raw.decode("utf-8")

    def test_empty_list(self):
        assert decode_tasks(encode_tasks([])) == []

    def test_rejects_garbage_bytes(self):
        with pytest.raises(TaskDecodeError):
            decode_tasks(b"\xff\xfe not json")

    def test_rejects_non_list(self):
        with pytest.raises(TaskDecodeError):
            decode_tasks(b'{"id": "1"}')

    def test_rejects_missing_flag(self):
        raw = json.dumps([{"id": "1", "title": "Test", "isCompleted": False}]).encode()
        with pytest.raises(TaskDecodeError):
            decode_tasks(raw)

    def test_rejects_wrong_flag_type(self):
        raw = json.dumps(
            [{"id": "1", "title": "Test", "isCompleted": "yes", "isSelected": False}]
        ).encode()
        with pytest.raises(TaskDecodeError):
            decode_tasks(raw)

    def test_rejects_empty_id(self):
        raw = json.dumps(
            [{"id": "", "title": "Test", "isCompleted": False, "isSelected": False}]
        ).encode()
        with pytest.raises(TaskDecodeError):
            decode_tasks(raw)

    def test_rejects_deep_nesting(self):
        with pytest.raises(TaskDecodeError):
            decode_tasks(b"[" * 100000)

    def test_rejects_duplicate_ids(self):
        item = {"id": "1", "title": "Test", "isCompleted": False, "isSelected": False}
        with pytest.raises(TaskDecodeError):
            decode_tasks(json.dumps([item, item]).encode())


class TestRemoveAt:
    def test_removes_positions_keeping_order(self, sample_tasks):
        result = remove_at(sample_tasks, {0, 2})
        assert [t.id for t in result] == ["b", "d"]

    def test_ignores_out_of_range(self, sample_tasks):
        result = remove_at(sample_tasks, {1, 4, 99, -1})
        assert [t.id for t in result] == ["a", "c", "d"]

    def test_empty_indices(self, sample_tasks):
        assert remove_at(sample_tasks, set()) == sample_tasks

    def test_does_not_mutate_input(self, sample_tasks):
        remove_at(sample_tasks, {0})
        assert len(sample_tasks) == 4


class TestRemoveSelected:
    def test_removes_only_selected(self, sample_tasks):
        result = remove_selected(sample_tasks)
        assert [t.id for t in result] == ["a", "b"]

    def test_nothing_selected(self):
        tasks = [Task(id="1", title="One"), Task(id="2", title="Two")]
        assert remove_selected(tasks) == tasks


class TestFindIndex:
    def test_found(self, sample_tasks):
        assert find_index(sample_tasks, "c") == 2

    def test_missing(self, sample_tasks):
        assert find_index(sample_tasks, "zzz") is None
