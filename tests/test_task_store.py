"""Tests for TaskStore."""

import random

import pytest

from ticklist.errors import IndexOutOfRange
from ticklist.models import Priority
from ticklist.repositories import MemoryMedium, load_tasks
from ticklist.services import TaskStore


@pytest.fixture
def medium() -> MemoryMedium:
    return MemoryMedium()


@pytest.fixture
def store(medium: MemoryMedium) -> TaskStore:
    return TaskStore(medium)


def make_store(medium: MemoryMedium, *texts: str, done: set[str] | None = None) -> TaskStore:
    """Build a store holding tasks with the given texts, marking some done."""
    store = TaskStore(medium)
    for text in texts:
        store.add(text)
    for index, task in enumerate(store.tasks):
        if done and task.text in done:
            store.toggle_done(index)
    return store


def texts(store: TaskStore) -> list[str]:
    return [task.text for task in store.tasks]


def records(tasks) -> list[dict]:
    return [task.to_record() for task in tasks]


class TestTaskStoreAdd:
    """Tests for adding tasks."""

    def test_add_appends_open_task(self, store: TaskStore):
        store.add("A")
        store.add("B", due_date="2025-01-01", priority=Priority.HIGH)

        assert texts(store) == ["A", "B"]
        assert store.tasks[1].priority == Priority.HIGH
        assert all(not task.done for task in store.tasks)

    @pytest.mark.parametrize("text", ["", "    "])
    def test_add_blank_text_is_noop(self, store: TaskStore, medium: MemoryMedium, text: str):
        """Blank text leaves the list and the medium untouched."""
        store.add("A")
        saved = medium.load("tasks")

        assert store.add(text) is None
        assert texts(store) == ["A"]
        assert medium.load("tasks") == saved

    def test_add_persists(self, store: TaskStore, medium: MemoryMedium):
        store.add("A")
        assert [t.text for t in load_tasks(medium.load("tasks"))] == ["A"]


class TestTaskStoreToggle:
    """Tests for toggle_done."""

    def test_toggle_twice_restores_flag(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B")

        store.toggle_done(1)
        assert store.tasks[1].done is True
        store.toggle_done(1)
        assert store.tasks[1].done is False

    def test_toggle_persists(self, medium: MemoryMedium):
        store = make_store(medium, "A")
        store.toggle_done(0)

        assert load_tasks(medium.load("tasks"))[0].done is True

    @pytest.mark.parametrize("index", [-1, 2, 99])
    def test_toggle_out_of_range(self, medium: MemoryMedium, index: int):
        store = make_store(medium, "A", "B")
        with pytest.raises(IndexOutOfRange):
            store.toggle_done(index)


class TestTaskStoreRemove:
    """Tests for remove."""

    def test_remove_shifts_left(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B", "C")
        removed = store.remove(1)

        assert removed.text == "B"
        assert texts(store) == ["A", "C"]

    def test_remove_out_of_range(self, store: TaskStore):
        with pytest.raises(IndexOutOfRange):
            store.remove(0)

    def test_index_error_compatible(self, store: TaskStore):
        """IndexOutOfRange can be caught as IndexError."""
        with pytest.raises(IndexError):
            store.remove(3)


class TestTaskStoreClearCompleted:
    """Tests for clear_completed."""

    def test_clear_completed_keeps_order(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B", "C", "D", done={"A", "C"})

        assert store.clear_completed() == 2
        assert texts(store) == ["B", "D"]

    def test_clear_completed_nothing_done(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B")
        assert store.clear_completed() == 0
        assert texts(store) == ["A", "B"]


class TestTaskStoreReorder:
    """Tests for reorder."""

    def test_reorder_forward(self, medium: MemoryMedium):
        """Dragging A onto D puts A just before D."""
        store = make_store(medium, "A", "B", "C", "D")
        assert store.reorder(0, 3) is True
        assert texts(store) == ["B", "C", "A", "D"]

    def test_reorder_backward(self, medium: MemoryMedium):
        """Dragging D onto A puts D just before A."""
        store = make_store(medium, "A", "B", "C", "D")
        assert store.reorder(3, 0) is True
        assert texts(store) == ["D", "A", "B", "C"]

    def test_reorder_adjacent_forward_is_noop(self, medium: MemoryMedium):
        """Dropping onto the next task leaves the list as it was and saves nothing."""
        store = make_store(medium, "A", "B", "C")
        saved = medium.load("tasks")

        assert store.reorder(0, 1) is False
        assert texts(store) == ["A", "B", "C"]
        assert medium.load("tasks") == saved

    def test_reorder_adjacent_backward_swaps(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B", "C")
        store.reorder(1, 0)
        assert texts(store) == ["B", "A", "C"]

    def test_reorder_same_index_is_noop(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B")
        saved = medium.load("tasks")

        assert store.reorder(1, 1) is False
        assert medium.load("tasks") == saved

    def test_reorder_persists(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B", "C")
        store.reorder(2, 0)
        assert [t.text for t in load_tasks(medium.load("tasks"))] == ["C", "A", "B"]

    @pytest.mark.parametrize(("from_index", "to_index"), [(0, 3), (3, 0), (-1, 0)])
    def test_reorder_out_of_range(self, medium: MemoryMedium, from_index: int, to_index: int):
        store = make_store(medium, "A", "B", "C")
        with pytest.raises(IndexOutOfRange):
            store.reorder(from_index, to_index)
        assert texts(store) == ["A", "B", "C"]


class TestTaskStoreCountOpen:
    """Tests for count_open."""

    def test_count_open(self, medium: MemoryMedium):
        store = make_store(medium, "A", "B", "C", done={"B"})
        assert store.count_open() == 2

    def test_count_open_never_drifts(self, store: TaskStore):
        """count_open matches the list after a long random run of operations."""
        rng = random.Random(1234)
        for step in range(300):
            op = rng.choice(["add", "add", "toggle", "remove", "reorder", "clear"])
            size = len(store)
            if op == "add" or size == 0:
                store.add(f"task {step}")
            elif op == "toggle":
                store.toggle_done(rng.randrange(size))
            elif op == "remove":
                store.remove(rng.randrange(size))
            elif op == "reorder":
                store.reorder(rng.randrange(size), rng.randrange(size))
            else:
                store.clear_completed()

            assert store.count_open() == sum(1 for t in store.tasks if not t.done)


class TestTaskStoreLoading:
    """Tests for loading from the medium."""

    def test_reload_restores_saved_list(self, medium: MemoryMedium):
        original = make_store(medium, "A", "B", "C", done={"B"})
        original.reorder(2, 0)

        reloaded = TaskStore(medium)
        assert records(reloaded.tasks) == records(original.tasks)

    def test_absent_data_is_empty(self):
        assert TaskStore(MemoryMedium()).tasks == []

    @pytest.mark.parametrize(
        "text",
        [
            "[{unclosed",
            "just a string",
            "{\"text\": \"A\"}",
            "[{\"text\": \"A\", \"priority\": \"urgent\"}]",
            "[{\"done\": true}]",
            "[{\"text\": \"   \", \"done\": false}]",
        ],
    )
    def test_malformed_data_is_empty(self, text: str, caplog: pytest.LogCaptureFixture):
        """Unreadable data is discarded with a warning."""
        store = TaskStore(MemoryMedium({"tasks": text}))

        assert store.tasks == []
        assert "Discarding unreadable task data" in caplog.text

    def test_custom_key(self):
        medium = MemoryMedium()
        store = TaskStore(medium, key="work")
        store.add("A")

        assert medium.load("work") is not None
        assert medium.load("tasks") is None

    def test_snapshot_is_a_copy(self, medium: MemoryMedium):
        """Mutating the snapshot list does not touch the canonical order."""
        store = make_store(medium, "A", "B")
        snapshot = store.tasks
        snapshot.reverse()

        assert texts(store) == ["A", "B"]
