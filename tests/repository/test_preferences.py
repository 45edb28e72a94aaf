import json

import pytest

from almanac.errors import PersistenceError
from almanac.repository.preferences import PreferenceStore


def test_missing_file_reads_as_empty(preferences):
    assert preferences.get_string("u") is None
    assert preferences.get_json("p", {}) == {}
    assert not preferences.path.exists()


def test_values_survive_a_new_instance(preferences, preferences_path):
    preferences.put_string("u", '{"entitlement": 10}')

    reopened = PreferenceStore(preferences_path)
    assert reopened.get_string("u") == '{"entitlement": 10}'
    assert reopened.get_json("u") == {"entitlement": 10}


def test_keys_are_independent(preferences, preferences_path):
    preferences.put_json("u", {"entitlement": 10})
    preferences.put_json("b", [])
    preferences.remove("u")

    reopened = PreferenceStore(preferences_path)
    assert reopened.get_string("u") is None
    assert reopened.get_json("b") == []


def test_remove_missing_key_is_a_noop(preferences):
    preferences.remove("p")
    assert not preferences.path.exists()


def test_default_is_copied(preferences):
    default: dict = {}
    value = preferences.get_json("p", default)
    value["x"] = 1
    assert default == {}


def test_corrupt_json_reads_as_default(preferences_path):
    preferences_path.parent.mkdir(parents=True)
    preferences_path.write_text("u: '{not json'\n")

    preferences = PreferenceStore(preferences_path)
    assert preferences.get_json("u", {"entitlement": 14}) == {"entitlement": 14}


@pytest.mark.parametrize("content", ["[unclosed: yaml\n", "- a\n- list\n", "\x00\x01"])
def test_corrupt_file_reads_as_empty(preferences_path, content):
    preferences_path.parent.mkdir(parents=True)
    preferences_path.write_text(content)

    preferences = PreferenceStore(preferences_path)
    assert preferences.get_string("u") is None


def test_corrupt_file_is_replaced_on_write(preferences_path):
    preferences_path.parent.mkdir(parents=True)
    preferences_path.write_text("[unclosed: yaml\n")

    preferences = PreferenceStore(preferences_path)
    preferences.put_json("u", {"entitlement": 7})

    assert PreferenceStore(preferences_path).get_json("u") == {"entitlement": 7}


def test_write_leaves_no_temporary_files(preferences, preferences_path):
    preferences.put_json("p", {"2026-01-01": {"note": "x", "time": "", "isLeave": False}})
    preferences.put_json("b", [])

    assert sorted(path.name for path in preferences_path.parent.iterdir()) == [
        "preferences.yaml"
    ]


def test_values_are_json_strings_on_disk(preferences, preferences_path):
    preferences.put_json("u", {"entitlement": 12})

    text = preferences_path.read_text()
    assert "entitlement" in text
    reopened = PreferenceStore(preferences_path)
    assert json.loads(reopened.get_string("u") or "") == {"entitlement": 12}


def test_write_failure_raises_and_keeps_state(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    preferences = PreferenceStore(blocker / "preferences.yaml")

    with pytest.raises(PersistenceError):
        preferences.put_string("u", '{"entitlement": 3}')

    assert preferences.get_string("u") is None
