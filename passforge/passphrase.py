"""
passforge.passphrase
Passphrase generator: random dictionary words, each with a random decoration.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from .constants import (
    ATTACH_FRONT,
    ATTACH_POSITIONS,
    INCLUDE_LOWERCASE,
    INCLUDE_NUMBERS,
    INCLUDE_SPECIAL_CHARACTERS,
    INCLUDE_UPPERCASE,
    MAX_WORD_COUNT,
    MAX_WORD_NUMBER,
    MIN_WORD_COUNT,
    SKIP_ACTION,
    SPECIAL_CHARS,
)
from .errors import InvalidWordCount
from .log import get_logger
from .random_source import SecureRandomSource
from .settings import PassphraseSettings, SettingsStore
from .wordlist import WORDS

logger = get_logger("passphrase")


@dataclass(frozen=True)
class PassphraseRequest:
    """
    Everything one passphrase generation needs.

    Each enabled flag adds a decoration that may be applied to a word;
    is_regenerate defaults to False, meaning the request is saved as the
    last-used settings first.
    """
    word_count: int
    separator: str = "-"
    include_uppercase: bool = False
    include_lowercase: bool = True
    include_numbers: bool = False
    include_special_chars: bool = False
    is_regenerate: bool = False

    @property
    def settings(self) -> PassphraseSettings:
        return PassphraseSettings(
            word_count=self.word_count,
            separator=self.separator,
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_special_chars=self.include_special_chars,
        )

    @classmethod
    def from_settings(cls, settings: PassphraseSettings, is_regenerate: bool = True) -> "PassphraseRequest":
        return cls(
            word_count=settings.word_count,
            separator=settings.separator,
            include_uppercase=settings.include_uppercase,
            include_lowercase=settings.include_lowercase,
            include_numbers=settings.include_numbers,
            include_special_chars=settings.include_special_chars,
            is_regenerate=is_regenerate,
        )


def available_decorations(request: PassphraseRequest) -> List[int]:
    decorations = [SKIP_ACTION]
    if request.include_uppercase:
        decorations.append(INCLUDE_UPPERCASE)
    if request.include_lowercase:
        decorations.append(INCLUDE_LOWERCASE)
    if request.include_numbers:
        decorations.append(INCLUDE_NUMBERS)
    if request.include_special_chars:
        decorations.append(INCLUDE_SPECIAL_CHARACTERS)
    return decorations


def _attach(word: str, extra: str, position: int) -> str:
    if position == ATTACH_FRONT:
        return extra + word
    return word + extra


def decorate(word: str, decoration: int, position: int, random: SecureRandomSource) -> str:
    if decoration == INCLUDE_UPPERCASE:
        return word[:1].upper() + word[1:]
    if decoration == INCLUDE_LOWERCASE:
        return word.lower()
    if decoration == INCLUDE_NUMBERS:
        return _attach(word, str(random.next_int(MAX_WORD_NUMBER)), position)
    if decoration == INCLUDE_SPECIAL_CHARACTERS:
        return _attach(word, random.choice(SPECIAL_CHARS), position)
    return word


class PassphraseGenerator:
    def __init__(
        self,
        store: SettingsStore,
        random_factory: Callable[[], SecureRandomSource] = SecureRandomSource,
        words: Sequence[str] = WORDS,
    ):
        self.store = store
        self.random_factory = random_factory
        self.words = words

    def generate(self, request: PassphraseRequest) -> str:
        """
        Generate a passphrase of request.word_count words joined by request.separator.

        Raises InvalidWordCount for a count outside [1, 20]. Errors from the
        settings store propagate unchanged.
        """
        if not MIN_WORD_COUNT <= request.word_count <= MAX_WORD_COUNT:
            raise InvalidWordCount(f"Word count must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}")

        if not request.is_regenerate:
            self.store.save_passphrase_settings(request.settings)
            logger.debug("Saved passphrase settings %s", request.settings)

        decorations = available_decorations(request)
        random = self.random_factory()
        selected = [random.choice(self.words) for _ in range(request.word_count)]

        processed = []
        for word in selected:
            decoration = random.choice(decorations)
            position = random.choice(ATTACH_POSITIONS)
            processed.append(decorate(word, decoration, position, random))

        logger.debug("Generated passphrase of %d words using %d decorations", request.word_count, len(decorations))
        return request.separator.join(processed)


def generate_passphrase(
    store: SettingsStore,
    word_count: int,
    separator: str = "-",
    include_uppercase: bool = False,
    include_lowercase: bool = True,
    include_numbers: bool = False,
    include_special_chars: bool = False,
    is_regenerate: bool = False,
) -> str:
    return PassphraseGenerator(store).generate(
        PassphraseRequest(
            word_count=word_count,
            separator=separator,
            include_uppercase=include_uppercase,
            include_lowercase=include_lowercase,
            include_numbers=include_numbers,
            include_special_chars=include_special_chars,
            is_regenerate=is_regenerate,
        )
    )
