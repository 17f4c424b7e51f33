import threading

from talking_calculator.config.preferences import JsonPreferenceStore
from talking_calculator.core.history import (
    DELIMITER,
    HistoryLog,
    PreferenceHistoryStore,
    deserialize,
    serialize,
)


class FakeStore:
    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.saved = []

    def load(self):
        return list(self.entries)

    def save(self, entries):
        self.saved.append(list(entries))


class BrokenStore(FakeStore):
    def save(self, entries):
        raise OSError("disk full")


def test_newest_first():
    history = HistoryLog()
    history.add_entry("1 + 1 = 2")
    history.add_entry("2 × 3 = 6")
    assert history.get_all() == ["2 × 3 = 6", "1 + 1 = 2"]


def test_capacity_evicts_oldest():
    history = HistoryLog()
    for i in range(1, 52):
        history.add_entry(f"entry {i}")
    entries = history.get_all()
    assert len(entries) == 50
    assert entries[0] == "entry 51"
    assert "entry 1" not in entries
    assert entries[-1] == "entry 2"


def test_get_all_returns_copy():
    history = HistoryLog()
    history.add_entry("a")
    history.get_all().append("b")
    assert history.get_all() == ["a"]


def test_clear():
    store = FakeStore()
    history = HistoryLog(store)
    history.add_entry("a")
    history.clear()
    assert history.get_all() == []
    assert store.saved[-1] == []


def test_loads_and_saves_through_store():
    store = FakeStore(["b", "a"])
    history = HistoryLog(store)
    assert history.get_all() == ["b", "a"]

    history.add_entry("c")
    assert store.saved == [["c", "b", "a"]]


def test_failed_save_keeps_entry(capsys):
    history = HistoryLog(BrokenStore())
    history.add_entry("1 + 1 = 2")
    assert history.get_all() == ["1 + 1 = 2"]
    assert "disk full" in capsys.readouterr().out


def test_serialize_round_trip():
    entries = ["12.3 + 4 = 16.3", "5 ÷ 2 = 2.5"]
    text = serialize(entries)
    assert text == f"12.3 + 4 = 16.3{DELIMITER}5 ÷ 2 = 2.5"
    assert deserialize(text) == entries
    assert deserialize("") == []


def test_preference_history_store(tmp_path):
    path = tmp_path / "prefs.json"
    history = HistoryLog(PreferenceHistoryStore(JsonPreferenceStore(str(path))))
    history.add_entry("1 + 1 = 2")
    history.add_entry("2 + 2 = 4")

    reloaded = HistoryLog(PreferenceHistoryStore(JsonPreferenceStore(str(path))))
    assert reloaded.get_all() == ["2 + 2 = 4", "1 + 1 = 2"]

    reloaded.clear()
    assert JsonPreferenceStore(str(path)).get(PreferenceHistoryStore.KEY) is None


def test_concurrent_adds_respect_capacity():
    history = HistoryLog()

    def worker(n):
        for i in range(40):
            history.add_entry(f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(history) == 50
