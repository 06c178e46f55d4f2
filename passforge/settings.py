"""
passforge.settings
Last-used generator settings and the stores that persist them.

Only the settings that produced a password or passphrase are stored,
never the generated string itself.
"""

import os
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .constants import DEFAULT_SEPARATOR, DEFAULT_WORD_COUNT
from .errors import SettingsStoreError
from .log import get_logger
from .storage import atomic_read_bytes, atomic_write_bytes, default_settings_path, dump_json_bytes, read_json_bytes

logger = get_logger("settings")


def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass(frozen=True)
class PasswordSettings:
    include_uppercase: bool = False
    include_lowercase: bool = True
    include_numbers: bool = False
    include_special_chars: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasswordSettings":
        """Build settings from stored keys; missing keys keep their defaults."""
        return cls(**{k: bool(v) for k, v in _known(cls, data).items()})


@dataclass(frozen=True)
class PassphraseSettings:
    word_count: int = DEFAULT_WORD_COUNT
    separator: str = DEFAULT_SEPARATOR
    include_uppercase: bool = False
    include_lowercase: bool = True
    include_numbers: bool = False
    include_special_chars: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PassphraseSettings":
        values = _known(cls, data)
        for k in ("include_uppercase", "include_lowercase", "include_numbers", "include_special_chars"):
            if k in values:
                values[k] = bool(values[k])
        if "word_count" in values:
            try:
                values["word_count"] = int(values["word_count"])
            except (TypeError, ValueError):
                del values["word_count"]
        # a zero/negative count means "never set"
        if values.get("word_count", DEFAULT_WORD_COUNT) <= 0:
            values["word_count"] = DEFAULT_WORD_COUNT
        if values.get("separator") is None:
            values["separator"] = DEFAULT_SEPARATOR
        return cls(**values)


class SettingsStore(ABC):
    """
    Persists the last-used generator settings.

    Reads return the default settings when nothing has been stored. The
    generators only ever call the save methods; the getters serve callers
    that want to regenerate with saved settings.
    """

    @abstractmethod
    def save_password_settings(self, settings: PasswordSettings) -> None:
        ...

    @abstractmethod
    def get_password_settings(self) -> PasswordSettings:
        ...

    @abstractmethod
    def save_passphrase_settings(self, settings: PassphraseSettings) -> None:
        ...

    @abstractmethod
    def get_passphrase_settings(self) -> PassphraseSettings:
        ...


class MemorySettingsStore(SettingsStore):
    """Keeps settings for the lifetime of the process."""

    def __init__(self) -> None:
        self._password: Optional[PasswordSettings] = None
        self._passphrase: Optional[PassphraseSettings] = None

    def save_password_settings(self, settings: PasswordSettings) -> None:
        self._password = settings

    def get_password_settings(self) -> PasswordSettings:
        return self._password or PasswordSettings()

    def save_passphrase_settings(self, settings: PassphraseSettings) -> None:
        self._passphrase = settings

    def get_passphrase_settings(self) -> PassphraseSettings:
        return self._passphrase or PassphraseSettings()


class JsonSettingsStore(SettingsStore):
    """
    Stores both settings snapshots in one JSON file:
    {"password": {...}, "passphrase": {...}}

    Writes replace the file atomically; write errors propagate to the caller.
    A missing file reads as defaults, a corrupt one raises SettingsStoreError.
    """

    PASSWORD_KEY = "password"
    PASSPHRASE_KEY = "passphrase"

    def __init__(self, path: Optional[str] = None):
        self.path = path or default_settings_path()

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            logger.debug("No settings file at %s, using defaults", self.path)
            return {}
        try:
            data = read_json_bytes(atomic_read_bytes(self.path))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SettingsStoreError(f"Cannot read settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsStoreError(f"Settings file {self.path} does not hold a JSON object")
        return data

    def _section(self, key: str) -> Dict[str, Any]:
        section = self._load().get(key) or {}
        if not isinstance(section, dict):
            logger.warning("Ignoring malformed '%s' section in %s", key, self.path)
            return {}
        return section

    def _save(self, key: str, values: Dict[str, Any]) -> None:
        data = self._load()
        data[key] = values
        atomic_write_bytes(self.path, dump_json_bytes(data))
        logger.debug("Saved %s settings to %s", key, self.path)

    def save_password_settings(self, settings: PasswordSettings) -> None:
        self._save(self.PASSWORD_KEY, settings.to_dict())

    def get_password_settings(self) -> PasswordSettings:
        return PasswordSettings.from_dict(self._section(self.PASSWORD_KEY))

    def save_passphrase_settings(self, settings: PassphraseSettings) -> None:
        self._save(self.PASSPHRASE_KEY, settings.to_dict())

    def get_passphrase_settings(self) -> PassphraseSettings:
        return PassphraseSettings.from_dict(self._section(self.PASSPHRASE_KEY))
