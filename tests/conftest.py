import pytest

from passforge.settings import MemorySettingsStore


class ScriptedRandom:
    """Returns pre-arranged values from next_int and records every bound asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next_int(self, bound):
        self.bounds.append(bound)
        value = self.values.pop(0)
        assert 0 <= value < bound
        return value

    def choice(self, seq):
        return seq[self.next_int(len(seq))]


class RecordingStore(MemorySettingsStore):
    def __init__(self):
        super().__init__()
        self.password_saves = []
        self.passphrase_saves = []

    def save_password_settings(self, settings):
        self.password_saves.append(settings)
        super().save_password_settings(settings)

    def save_passphrase_settings(self, settings):
        self.passphrase_saves.append(settings)
        super().save_passphrase_settings(settings)


class FailingStore(MemorySettingsStore):
    def save_password_settings(self, settings):
        raise OSError("disk full")

    def save_passphrase_settings(self, settings):
        raise OSError("disk full")


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def scripted():
    def make(values):
        source = ScriptedRandom(values)
        return source, (lambda: source)
    return make


@pytest.fixture
def failing_store():
    return FailingStore()
