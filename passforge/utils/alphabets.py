"""
Character class alphabets.
"""

import string
from enum import Enum
from typing import List, NamedTuple


class CharacterClass(Enum):
    LOWER = "lowercase"
    UPPER = "uppercase"
    DIGITS = "digits"
    SPECIAL = "special"


SPECIAL_CHARS = "!@#$%^&*()-_=+[{]}\\|;:'\",<.>/?`~"

# Base alphabets, in the fixed class order used for grouping
ALPHABETS = {
    CharacterClass.LOWER: string.ascii_lowercase,
    CharacterClass.UPPER: string.ascii_uppercase,
    CharacterClass.DIGITS: string.digits,
    CharacterClass.SPECIAL: SPECIAL_CHARS,
}

# Removed when ambiguous characters are avoided
AMBIGUOUS_CHARS = {
    CharacterClass.LOWER: "",
    CharacterClass.UPPER: "O",
    CharacterClass.DIGITS: "0",
    CharacterClass.SPECIAL: "|",
}

CLASS_ORDER = (
    CharacterClass.LOWER,
    CharacterClass.UPPER,
    CharacterClass.DIGITS,
    CharacterClass.SPECIAL,
)


class ClassEntry(NamedTuple):
    """One row of the ordered class table."""
    char_class: CharacterClass
    alphabet: str
    enabled: bool


def get_alphabet(char_class: CharacterClass, avoid_ambiguous: bool = False) -> str:
    """Return the ordered alphabet for a class, minus ambiguous chars if requested."""
    alphabet = ALPHABETS[char_class]
    if avoid_ambiguous:
        excluded = AMBIGUOUS_CHARS[char_class]
        alphabet = "".join(c for c in alphabet if c not in excluded)
    return alphabet


def build_class_table(use_lower: bool, use_upper: bool, use_digits: bool,
                      use_special: bool, avoid_ambiguous: bool) -> List[ClassEntry]:
    """Build the ordered (class, alphabet, enabled) table."""
    flags = {
        CharacterClass.LOWER: use_lower,
        CharacterClass.UPPER: use_upper,
        CharacterClass.DIGITS: use_digits,
        CharacterClass.SPECIAL: use_special,
    }
    return [
        ClassEntry(char_class, get_alphabet(char_class, avoid_ambiguous), bool(flags[char_class]))
        for char_class in CLASS_ORDER
    ]
