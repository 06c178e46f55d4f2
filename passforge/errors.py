"""
passforge.errors
Exceptions raised by the generators, the random source and the settings stores.
"""


class PassForgeError(Exception):
    """Base class for every passforge error."""


class InvalidLength(PassForgeError, ValueError):
    """Password length outside the accepted range."""


class InvalidWordCount(PassForgeError, ValueError):
    """Passphrase word count outside the accepted range."""


class AllCharactersExcluded(PassForgeError, ValueError):
    """The exclusion list removed every candidate character."""


class InvalidArgument(PassForgeError, ValueError):
    """A non-positive bound was requested from the random source."""


class SettingsStoreError(PassForgeError):
    """Stored settings could not be read back."""
