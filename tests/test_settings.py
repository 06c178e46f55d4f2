import os
import json
import tempfile

import pytest

from passforge.constants import DEFAULT_WORD_COUNT
from passforge.errors import SettingsStoreError
from passforge.generator import PasswordGenerator, PasswordRequest
from passforge.passphrase import PassphraseGenerator, PassphraseRequest
from passforge.settings import JsonSettingsStore, MemorySettingsStore, PassphraseSettings, PasswordSettings, SettingsStore


def test_defaults():
    assert PasswordSettings() == PasswordSettings(
        include_uppercase=False, include_lowercase=True, include_numbers=False, include_special_chars=False
    )
    p = PassphraseSettings()
    assert p.word_count == 4
    assert p.separator == "-"
    assert p.include_lowercase and not (p.include_uppercase or p.include_numbers or p.include_special_chars)

def test_settings_are_immutable():
    s = PasswordSettings()
    with pytest.raises(AttributeError):
        s.include_uppercase = True

def test_from_dict_fills_missing_and_ignores_unknown():
    s = PassphraseSettings.from_dict({"separator": " ", "colour": "blue"})
    assert s == PassphraseSettings(separator=" ")
    assert PasswordSettings.from_dict({}) == PasswordSettings()

def test_from_dict_non_positive_word_count_means_default():
    assert PassphraseSettings.from_dict({"word_count": 0}).word_count == DEFAULT_WORD_COUNT
    assert PassphraseSettings.from_dict({"word_count": "bad"}).word_count == DEFAULT_WORD_COUNT

def test_store_is_abstract():
    with pytest.raises(TypeError):
        SettingsStore()

def test_memory_store_round_trip():
    store = MemorySettingsStore()
    assert store.get_password_settings() == PasswordSettings()
    assert store.get_passphrase_settings() == PassphraseSettings()
    pw = PasswordSettings(include_uppercase=True, include_numbers=True)
    pp = PassphraseSettings(word_count=9, separator=" ", include_special_chars=True)
    store.save_password_settings(pw)
    store.save_passphrase_settings(pp)
    assert store.get_password_settings() == pw
    assert store.get_passphrase_settings() == pp

def test_json_store_missing_file_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        store = JsonSettingsStore(os.path.join(td, "settings.json"))
        assert store.get_password_settings() == PasswordSettings()
        assert store.get_passphrase_settings() == PassphraseSettings()
        assert not os.path.exists(store.path)

def test_json_store_round_trip_keeps_both_sections():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "nested", "settings.json")
        store = JsonSettingsStore(path)
        pw = PasswordSettings(include_uppercase=True, include_lowercase=False, include_special_chars=True)
        pp = PassphraseSettings(word_count=12, separator="·", include_numbers=True)
        store.save_password_settings(pw)
        store.save_passphrase_settings(pp)

        reopened = JsonSettingsStore(path)
        assert reopened.get_password_settings() == pw
        assert reopened.get_passphrase_settings() == pp

        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert raw["password"]["include_special_chars"] is True
        assert raw["passphrase"]["word_count"] == 12
        assert not os.path.exists(path + ".tmp")

def test_json_store_corrupt_file():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "settings.json")
        with open(path, "w") as f:
            f.write("{not json")
        store = JsonSettingsStore(path)
        with pytest.raises(SettingsStoreError):
            store.get_password_settings()
        # saving must not silently overwrite a file we cannot read
        with pytest.raises(SettingsStoreError):
            store.save_password_settings(PasswordSettings())

def test_json_store_non_object_file():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "settings.json")
        with open(path, "w") as f:
            f.write("[1, 2]")
        with pytest.raises(SettingsStoreError):
            JsonSettingsStore(path).get_passphrase_settings()

def test_generators_persist_through_json_store():
    with tempfile.TemporaryDirectory() as td:
        store = JsonSettingsStore(os.path.join(td, "settings.json"))
        PasswordGenerator(store).generate(PasswordRequest(length=8, include_numbers=True, include_lowercase=False))
        PassphraseGenerator(store).generate(PassphraseRequest(word_count=6, separator="."))
        assert store.get_password_settings() == PasswordSettings(include_lowercase=False, include_numbers=True)
        assert store.get_passphrase_settings() == PassphraseSettings(word_count=6, separator=".")

def test_generated_values_are_never_stored():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "settings.json")
        store = JsonSettingsStore(path)
        pw = PasswordGenerator(store).generate(PasswordRequest(length=32, include_uppercase=True))
        with open(path, "r", encoding="utf-8") as f:
            assert pw not in f.read()
