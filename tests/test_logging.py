import logging_utils


def test_disabled_logging_writes_nothing(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "debug.txt"
    monkeypatch.setattr(logging_utils, "LOG_ENABLED", False)
    monkeypatch.setattr(logging_utils, "_LOG_PATH", path)
    logging_utils.log_event("Game", "start", previous="idle")
    assert not path.exists()


def test_enabled_logging_appends_event_lines(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "debug.txt"
    monkeypatch.setattr(logging_utils, "LOG_ENABLED", True)
    monkeypatch.setattr(logging_utils, "_LOG_PATH", path)
    logging_utils.log_event("Game", "start", previous="idle")
    logging_utils.log_event("Game", "end_game", score=10, high_score=30)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].split(" ", 1)[1] == "Game.start previous=idle"
    assert lines[1].split(" ", 1)[1] == "Game.end_game score=10 high_score=30"


def test_event_without_fields(tmp_path, monkeypatch):
    path = tmp_path / "debug.txt"
    monkeypatch.setattr(logging_utils, "LOG_ENABLED", True)
    monkeypatch.setattr(logging_utils, "_LOG_PATH", path)
    logging_utils.log_event("run_game", "quit")
    assert path.read_text(encoding="utf-8").rstrip().endswith(" run_game.quit")


def test_field_formatting():
    text = logging_utils.format_fields({"y": 212.456, "kind": "shield", "name": "two words", "skin": ""})
    assert text == "y=212.5 kind=shield name='two words' skin=''"
