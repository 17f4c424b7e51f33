from talking_calculator.config.accessibility import AccessibilityConfig
from talking_calculator.config.preferences import JsonPreferenceStore


def test_defaults():
    config = AccessibilityConfig()
    assert config.voice_enabled
    assert config.haptic_enabled
    assert config.learning_mode
    assert config.history_limit == 50
    assert config.get_speech_rate() == 150


def test_speech_speed_is_clamped():
    config = AccessibilityConfig()
    config.set_speech_speed(5)
    assert config.speech_speed == 2.0
    config.set_speech_speed(0.1)
    assert config.speech_speed == 0.5
    config.set_speech_speed(1.5)
    assert config.get_speech_rate() == 225


def test_preferences_round_trip(tmp_path):
    path = str(tmp_path / "prefs.json")
    config = AccessibilityConfig()
    config.haptic_enabled = False
    config.learning_mode = False
    config.set_speech_speed(1.2)
    config.save_preferences(JsonPreferenceStore(path))

    loaded = AccessibilityConfig()
    loaded.load_preferences(JsonPreferenceStore(path))
    assert not loaded.haptic_enabled
    assert not loaded.learning_mode
    assert loaded.voice_enabled
    assert loaded.speech_speed == 1.2


def test_invalid_saved_speed_keeps_default(tmp_path, capsys):
    store = JsonPreferenceStore(str(tmp_path / "prefs.json"))
    store.set("speech_speed", "fast")
    config = AccessibilityConfig()
    config.load_preferences(store)
    assert config.speech_speed == 1.0
    assert "⚠" in capsys.readouterr().out


def test_missing_file_is_empty(tmp_path):
    store = JsonPreferenceStore(str(tmp_path / "missing" / "prefs.json"))
    assert store.get("anything", "default") == "default"
    store.set("key", "value")
    assert JsonPreferenceStore(str(tmp_path / "missing" / "prefs.json")).get("key") == "value"


def test_corrupt_file_is_empty(tmp_path, capsys):
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonPreferenceStore(str(path))
    assert store.values == {}
    assert "⚠" in capsys.readouterr().out


def test_remove(tmp_path):
    store = JsonPreferenceStore(str(tmp_path / "prefs.json"))
    store.set("key", "value")
    store.remove("key")
    store.remove("key")
    assert store.get("key") is None
