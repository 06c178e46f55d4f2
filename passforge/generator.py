"""
passforge.generator
Secure password generator with per-class coverage and character exclusions.
"""

from dataclasses import dataclass
from typing import Callable, List

from .constants import (
    EXCLUDE_DELIMITER,
    LOWERCASE,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    NUMBERS,
    SPECIAL_CHARS,
    UPPERCASE,
)
from .errors import AllCharactersExcluded, InvalidLength
from .log import get_logger
from .random_source import SecureRandomSource
from .settings import PasswordSettings, SettingsStore

logger = get_logger("generator")


@dataclass(frozen=True)
class PasswordRequest:
    """
    Everything one password generation needs.

    exclude_characters defaults to "" (nothing excluded; commas are ignored).
    is_regenerate defaults to False, meaning the flags are saved as the
    last-used settings before generating.
    """
    length: int
    include_uppercase: bool = False
    include_lowercase: bool = True
    include_numbers: bool = False
    include_special_chars: bool = False
    exclude_characters: str = ""
    is_regenerate: bool = False

    @property
    def settings(self) -> PasswordSettings:
        return PasswordSettings(
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_special_chars=self.include_special_chars,
        )

    @classmethod
    def from_settings(
        cls,
        settings: PasswordSettings,
        length: int,
        exclude_characters: str = "",
        is_regenerate: bool = True,
    ) -> "PasswordRequest":
        return cls(
            length=length,
            include_uppercase=settings.include_uppercase,
            include_lowercase=settings.include_lowercase,
            include_numbers=settings.include_numbers,
            include_special_chars=settings.include_special_chars,
            exclude_characters=exclude_characters,
            is_regenerate=is_regenerate,
        )


class PasswordGenerator:
    def __init__(self, store: SettingsStore, random_factory: Callable[[], SecureRandomSource] = SecureRandomSource):
        self.store = store
        self.random_factory = random_factory

    def generate(self, request: PasswordRequest) -> str:
        """
        Generate a cryptographically secure password of exactly request.length characters.

        Raises InvalidLength for a length outside [1, 128] and
        AllCharactersExcluded when the exclusions leave no candidates.
        Errors from the settings store propagate unchanged.
        """
        length = request.length
        if not MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
            raise InvalidLength(
                f"Password length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
            )

        if not request.is_regenerate:
            self.store.save_password_settings(request.settings)
            logger.debug("Saved password settings %s", request.settings)

        requested = [
            (request.include_uppercase, UPPERCASE),
            (request.include_lowercase, LOWERCASE),
            (request.include_numbers, NUMBERS),
            (request.include_special_chars, SPECIAL_CHARS),
        ]
        charset = "".join(pool for enabled, pool in requested if enabled)
        if not charset:
            charset = LOWERCASE

        excluded = set(request.exclude_characters.replace(EXCLUDE_DELIMITER, ""))
        charset = "".join(c for c in charset if c not in excluded)
        if not charset:
            raise AllCharactersExcluded(
                "Cannot generate password: all character sets excluded or nothing left after exclude_characters"
            )

        random = self.random_factory()

        # one character from every requested class that survived the exclusions
        required_chars: List[str] = []
        for enabled, pool in requested:
            available = [c for c in pool if c in charset]
            if enabled and available:
                required_chars.append(random.choice(available))

        password = [random.choice(charset) for _ in range(length - len(required_chars))]

        for char in required_chars:
            position = random.next_int(len(password) + 1) if password else 0
            password.insert(position, char)

        logger.debug("Generated password of length %d from %d candidate characters", length, len(charset))
        return "".join(password[:length])


def generate_password(
    store: SettingsStore,
    length: int,
    include_uppercase: bool = False,
    include_lowercase: bool = True,
    include_numbers: bool = False,
    include_special_chars: bool = False,
    exclude_characters: str = "",
    is_regenerate: bool = False,
) -> str:
    """Keyword shortcut for PasswordGenerator(store).generate(PasswordRequest(...))."""
    return PasswordGenerator(store).generate(
        PasswordRequest(
            length=length,
            include_uppercase=include_uppercase,
            include_lowercase=include_lowercase,
            include_numbers=include_numbers,
            include_special_chars=include_special_chars,
            exclude_characters=exclude_characters,
            is_regenerate=is_regenerate,
        )
    )
