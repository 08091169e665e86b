"""
Tests for lexicon.loader module.
"""

import json
import logging

from lexicon.loader import load_content, load_list


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_list(tmp_path):
    path = write_json(tmp_path / "words.json", {"words": ["Cat", " dog ", "bird"]})
    assert load_list(path, "words") == ["Cat", " dog ", "bird"]


def test_load_list_skips_non_strings(tmp_path, caplog):
    path = write_json(tmp_path / "words.json", {"words": ["cat", 3, None, "dog"]})
    with caplog.at_level(logging.WARNING, logger="lexicon"):
        assert load_list(path, "words") == ["cat", "dog"]
    assert "Skipped 2" in caplog.text


def test_load_list_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="lexicon"):
        assert load_list(str(tmp_path / "nope.json"), "words") == []
    assert "Could not open" in caplog.text


def test_load_list_no_path():
    assert load_list(None, "words") == []


def test_load_list_missing_key(tmp_path, caplog):
    path = write_json(tmp_path / "words.json", {"prefixes": ["ab"]})
    with caplog.at_level(logging.ERROR, logger="lexicon"):
        assert load_list(path, "words") == []
    assert "not found" in caplog.text


def test_load_list_not_an_array(tmp_path):
    path = write_json(tmp_path / "words.json", {"words": "cat"})
    assert load_list(path, "words") == []


def test_load_list_invalid_json(tmp_path):
    path = tmp_path / "words.json"
    path.write_text('{"words": ["cat",', encoding="utf-8")
    assert load_list(str(path), "words") == []


def test_load_content(tmp_path):
    content = load_content(
        write_json(tmp_path / "w.json", {"words": ["cat"]}),
        write_json(tmp_path / "p.json", {"prefixes": ["ca"]}),
        write_json(tmp_path / "n.json", {"nsfw": ["heck"]}),
    )
    assert content.words == ["cat"]
    assert content.prefixes == ["ca"]
    assert content.nsfw == ["heck"]
