"""
PassForge: cryptographically random passwords and passphrases with
last-used settings persistence.
"""

from .errors import (
    AllCharactersExcluded,
    InvalidArgument,
    InvalidLength,
    InvalidWordCount,
    PassForgeError,
    SettingsStoreError,
)
from .generator import PasswordGenerator, PasswordRequest, generate_password
from .passphrase import PassphraseGenerator, PassphraseRequest, generate_passphrase
from .random_source import SecureRandomSource
from .settings import (
    JsonSettingsStore,
    MemorySettingsStore,
    PassphraseSettings,
    PasswordSettings,
    SettingsStore,
)

__version__ = "0.1.0"
