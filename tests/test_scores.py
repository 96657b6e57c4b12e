import json

import pytest

from hardwordle.scores import (
    SCORES_FILENAME,
    Scores,
    default_scores_path,
    load_scores,
    save_scores,
)


def test_record_win_updates_everything():
    s = Scores()
    s.record_win(3)
    s.record_win(3)
    assert (s.played, s.wins, s.streak, s.max_streak) == (2, 2, 2, 2)
    assert s.distribution[3] == 2
    assert sum(s.distribution) == s.wins


def test_record_loss_resets_streak_keeps_max():
    s = Scores()
    s.record_win(1)
    s.record_win(2)
    s.record_loss()
    assert s.streak == 0
    assert s.max_streak == 2
    assert s.played == 3


def test_record_win_rejects_out_of_range():
    with pytest.raises(ValueError):
        Scores().record_win(7)
    with pytest.raises(ValueError):
        Scores().record_win(0)


def test_win_percentage():
    assert Scores().win_percentage() == 0
    s = Scores(played=3, wins=1)
    assert s.win_percentage() == 33


def test_to_dict_keys():
    assert list(Scores().to_dict()) == ["played", "wins", "streak", "max_streak", "distribution"]


def test_round_trip(tmp_path):
    path = tmp_path / "scores.json"
    s = Scores()
    s.record_win(4)
    s.record_loss()
    save_scores(s, path)
    assert load_scores(path) == s
    assert json.loads(path.read_text()) == s.to_dict()


def test_load_missing_file(tmp_path):
    assert load_scores(tmp_path / "missing.json") == Scores()


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("not json")
    assert load_scores(path) == Scores()


def test_load_partial_distribution(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"played": 5, "distribution": [0, 1, 2]}))
    loaded = load_scores(path)
    assert loaded.played == 5
    assert loaded.wins == 0
    assert loaded.distribution == [0, 1, 2, 0, 0, 0, 0]


def test_save_to_unwritable_location_is_ignored(tmp_path):
    path = tmp_path / "no_such_dir" / "scores.json"
    save_scores(Scores(), path)
    assert not path.exists()


def test_default_path_in_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert default_scores_path() == tmp_path / SCORES_FILENAME