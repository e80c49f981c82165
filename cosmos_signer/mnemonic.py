"""
BIP-39 mnemonic phrases.

Word lists come from the ``mnemonic`` package (the Trezor reference
implementation), which also provides the PBKDF2 seed stretch. Parsing,
language detection and checksum validation are done here so that each
failure surfaces as its own error type.
"""
import logging
import os
import unicodedata
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

from mnemonic import Mnemonic as _ReferenceMnemonic

from .exceptions import (
    AmbiguousWordList, BadEntropyBitCount, BadWordCount, InvalidChecksum, UnknownWord
)
from .utils import sha256

logger = logging.getLogger(__name__)

VALID_WORD_COUNTS = (12, 15, 18, 21, 24)
MIN_ENTROPY_BITS = 128
MAX_ENTROPY_BITS = 256
WORD_BITS = 11


class Language(str, Enum):
    """Supported word lists, in detection order."""
    ENGLISH = "english"
    SIMPLIFIED_CHINESE = "chinese_simplified"
    TRADITIONAL_CHINESE = "chinese_traditional"
    CZECH = "czech"
    FRENCH = "french"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    SPANISH = "spanish"

    @property
    def unique_words(self) -> bool:
        """True if no word of this list appears in another supported list."""
        return self in _UNIQUE_WORD_LANGUAGES


_UNIQUE_WORD_LANGUAGES = frozenset({
    Language.CZECH, Language.ITALIAN, Language.JAPANESE, Language.KOREAN, Language.SPANISH
})


def _nfkd(value: str) -> str:
    return unicodedata.normalize("NFKD", value)


@lru_cache(maxsize=None)
def word_list(language: Language) -> Tuple[str, ...]:
    """The 2048 NFKD-normalized words of ``language``."""
    words = _ReferenceMnemonic(language.value).wordlist
    return tuple(_nfkd(word) for word in words)


@lru_cache(maxsize=None)
def _word_indices(language: Language) -> Dict[str, int]:
    return {word: index for index, word in enumerate(word_list(language))}


def detect_language(words: Sequence[str]) -> Language:
    """
    Work out which word list a phrase was written with.

    Lists with unique words are matched on the first word alone. The
    remaining lists are narrowed down word by word until one is left.

    Raises:
        BadWordCount: If ``words`` is empty
        UnknownWord: If a word is in none of the remaining lists
        AmbiguousWordList: If more than one list matches every word
    """
    if not words or not words[0]:
        raise BadWordCount(0)

    for language in Language:
        if language.unique_words and words[0] in _word_indices(language):
            return language

    candidates = [language for language in Language if not language.unique_words]
    for word in words:
        candidates = [language for language in candidates if word in _word_indices(language)]
        if not candidates:
            raise UnknownWord(word)
        if len(candidates) == 1:
            return candidates[0]

    raise AmbiguousWordList([language.value for language in candidates])


class Mnemonic:
    """
    A checksummed BIP-39 phrase of 12, 15, 18, 21 or 24 words.
    """

    __slots__ = ("_words", "language")

    def __init__(self, words: Sequence[str], language: Language):
        self._words = tuple(words)
        self.language = language

    @classmethod
    def parse(cls, phrase: str, language: Optional[Language] = None) -> "Mnemonic":
        """
        Parse and validate a phrase.

        Args:
            phrase: Words separated by whitespace
            language: Word list to use; detected from the words when omitted

        Returns:
            Validated mnemonic

        Raises:
            Bip39Error: If the word count, a word, the language or the
                checksum is invalid
        """
        words = _nfkd(phrase).split()
        if language is None:
            language = detect_language(words)
            logger.debug(f"Detected mnemonic language: {language.value}")
        mnemonic = cls(words, language)
        # Validates the word count, the words and the checksum
        mnemonic.to_entropy()
        return mnemonic

    @classmethod
    def from_entropy(cls, entropy: bytes, language: Language = Language.ENGLISH) -> "Mnemonic":
        """
        Encode 16 to 32 bytes of entropy (in steps of 4) as a phrase.

        Raises:
            BadEntropyBitCount: If the entropy length is not supported
        """
        bits = len(entropy) * 8
        if bits < MIN_ENTROPY_BITS or bits > MAX_ENTROPY_BITS or bits % 32:
            raise BadEntropyBitCount(bits)

        checksum_bits = bits // 32
        checksum = sha256(entropy)[0] >> (8 - checksum_bits)
        value = (int.from_bytes(entropy, "big") << checksum_bits) | checksum

        word_count = (bits + checksum_bits) // WORD_BITS
        words = word_list(language)
        indices = [
            (value >> (WORD_BITS * (word_count - 1 - position))) & 0x7FF
            for position in range(word_count)
        ]
        return cls([words[index] for index in indices], language)

    @classmethod
    def generate(cls, word_count: int = 24, language: Language = Language.ENGLISH) -> "Mnemonic":
        """Create a new phrase from operating-system randomness."""
        if word_count not in VALID_WORD_COUNTS:
            raise BadWordCount(word_count)
        entropy_bits = word_count * WORD_BITS * 32 // 33
        return cls.from_entropy(os.urandom(entropy_bits // 8), language)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def to_entropy(self) -> bytes:
        count = len(self._words)
        if count not in VALID_WORD_COUNTS:
            raise BadWordCount(count)

        indices = _word_indices(self.language)
        value = 0
        for word in self._words:
            index = indices.get(word)
            if index is None:
                raise UnknownWord(word)
            value = (value << WORD_BITS) | index

        checksum_bits = count * WORD_BITS // 33
        entropy_bits = count * WORD_BITS - checksum_bits
        entropy = (value >> checksum_bits).to_bytes(entropy_bits // 8, "big")
        checksum = value & ((1 << checksum_bits) - 1)
        if checksum != sha256(entropy)[0] >> (8 - checksum_bits):
            raise InvalidChecksum("Mnemonic checksum does not match its entropy")
        return entropy

    def to_seed(self, passphrase: str = "") -> bytes:
        """
        Stretch the phrase into a 64-byte BIP-32 seed.

        PBKDF2-HMAC-SHA512 with 2048 iterations over the NFKD phrase, salted
        with ``"mnemonic"`` plus the NFKD passphrase.
        """
        return _ReferenceMnemonic.to_seed(" ".join(self._words), passphrase)

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other):
        if not isinstance(other, Mnemonic):
            return NotImplemented
        return self._words == other._words and self.language == other.language

    def __hash__(self):
        return hash((self._words, self.language))

    def __str__(self) -> str:
        return " ".join(self._words)

    def __repr__(self) -> str:
        # Phrases are secrets
        return f"Mnemonic(<{len(self._words)} words>, language={self.language.value!r})"


def phrase_to_seed(phrase: str, passphrase: str = "") -> bytes:
    """Parse ``phrase`` and return its BIP-32 seed."""
    return Mnemonic.parse(phrase).to_seed(passphrase)
