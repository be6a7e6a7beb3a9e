"""
Password generation with guaranteed character class coverage.

The password slots are split into one contiguous group per enabled class
at random boundaries, each group is filled from its class alphabet, and
the grouped characters are then read back through a random permutation.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from ..exceptions import (
    ConfigurationError,
    LengthTooShortError,
    NoCharacterClassSelectedError,
)
from .alphabets import ClassEntry, build_class_table
from .random_source import RandomSource, get_default_source
from .sampling import random_in_range, unique_randoms_in_range

logger = logging.getLogger(__name__)


DEFAULT_OPTIONS: Dict[str, Any] = {
    "length": 12,
    "use_lower": True,
    "use_upper": True,
    "use_digits": True,
    "use_special": True,
    "avoid_ambiguous": True,
}

# Accepted spellings for PasswordConfig.from_dict
_OPTION_ALIASES = {
    "length": "length",
    "passwordLength": "length",
    "use_lower": "use_lower",
    "useLower": "use_lower",
    "hasLowerCase": "use_lower",
    "use_upper": "use_upper",
    "useUpper": "use_upper",
    "hasUpperCase": "use_upper",
    "use_digits": "use_digits",
    "useDigits": "use_digits",
    "hasNumbers": "use_digits",
    "use_special": "use_special",
    "useSpecial": "use_special",
    "hasSpecial": "use_special",
    "avoid_ambiguous": "avoid_ambiguous",
    "avoidAmbiguous": "avoid_ambiguous",
    "nonAmbiguous": "avoid_ambiguous",
}


_FLAG_FIELDS = ("use_lower", "use_upper", "use_digits", "use_special", "avoid_ambiguous")

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


def _parse_option(name: str, value: Any) -> Any:
    """Convert form text ("false", "16") into the field's type."""
    if not isinstance(value, str):
        return value

    text = value.strip().lower()
    if name == "length":
        try:
            return int(text)
        except ValueError:
            raise ConfigurationError(f"Length must be an integer, got {value!r}") from None

    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"Option {name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class PasswordConfig:
    """Options for a single generation request."""

    length: int = DEFAULT_OPTIONS["length"]
    use_lower: bool = True
    use_upper: bool = True
    use_digits: bool = True
    use_special: bool = True
    avoid_ambiguous: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ConfigurationError(f"Length must be an integer, got {self.length!r}")
        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"Option {name} must be a boolean, got {value!r}")

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "PasswordConfig":
        """
        Build a config from a mapping of options.

        Keys may use snake_case field names or their camelCase form;
        missing keys take the defaults. String values from form data are
        parsed ("false", "on", "16").

        Raises:
            ConfigurationError: On unknown keys or unparseable values
        """
        values: Dict[str, Any] = {}
        for key, value in options.items():
            if key not in _OPTION_ALIASES:
                raise ConfigurationError(f"Unknown password option: {key}")
            name = _OPTION_ALIASES[key]
            values[name] = _parse_option(name, value)

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class GenerationError(Enum):
    """Data conditions under which no password can be produced."""

    NO_CLASS_SELECTED = "no character class selected"
    LENGTH_TOO_SHORT = "length is smaller than the number of selected classes"


class GenerationResult(NamedTuple):
    """Either a generated password or the reason none was produced."""

    password: str
    error: Optional[GenerationError] = None

    @classmethod
    def ok(cls, password: str) -> "GenerationResult":
        return cls(password, None)

    @classmethod
    def failed(cls, error: GenerationError) -> "GenerationResult":
        return cls("", error)

    @property
    def is_ok(self) -> bool:
        return self.error is None


class PasswordGenerator:
    """Generate passwords containing every enabled character class."""

    def __init__(self,
                 config: Optional[PasswordConfig] = None,
                 source: Optional[RandomSource] = None):
        """
        Initialize password generator.

        Args:
            config: Generation options (defaults to DEFAULT_OPTIONS)
            source: Uniform random source (process default if omitted)
        """
        self.config = config if config is not None else PasswordConfig()
        self.source = source if source is not None else get_default_source()

        self.class_table = build_class_table(
            use_lower=self.config.use_lower,
            use_upper=self.config.use_upper,
            use_digits=self.config.use_digits,
            use_special=self.config.use_special,
            avoid_ambiguous=self.config.avoid_ambiguous,
        )

    def enabled_classes(self) -> List[ClassEntry]:
        """Enabled class entries in fixed class order."""
        return [entry for entry in self.class_table if entry.enabled]

    def generate_result(self) -> GenerationResult:
        """
        Generate a password.

        Returns:
            GenerationResult holding the password, or the reason it
            could not be generated
        """
        length = self.config.length
        enabled = self.enabled_classes()
        class_count = len(enabled)

        logger.debug("Enabled classes: %s", [e.char_class.value for e in enabled])

        if not class_count:
            logger.warning("Password not generated: no character class selected")
            return GenerationResult.failed(GenerationError.NO_CLASS_SELECTED)

        if length < class_count:
            logger.warning(
                "Password not generated: length %d < %d selected classes",
                length, class_count,
            )
            return GenerationResult.failed(GenerationError.LENGTH_TOO_SHORT)

        # Group boundaries: 0, the sorted random starts, then length
        starts = sorted(unique_randoms_in_range(class_count - 1, 1, length - 1, self.source))
        boundaries = [0] + starts + [length]
        logger.debug("Group boundaries: %s", boundaries)

        grouped_chars: List[str] = []
        for entry, group_start, next_group_start in zip(enabled, boundaries, boundaries[1:]):
            alphabet = entry.alphabet
            for _ in range(group_start, next_group_start):
                grouped_chars.append(alphabet[random_in_range(0, len(alphabet) - 1, self.source)])

        sequence = unique_randoms_in_range(length, 0, length - 1, self.source)
        password = "".join(grouped_chars[idx] for idx in sequence)

        return GenerationResult.ok(password)

    def generate(self) -> str:
        """
        Generate a password.

        Returns:
            Generated password string, or "" if the configuration cannot
            produce one
        """
        return self.generate_result().password

    def generate_or_raise(self) -> str:
        """
        Generate a password, raising instead of returning "".

        Raises:
            NoCharacterClassSelectedError: If every class is disabled
            LengthTooShortError: If length is smaller than the class count
        """
        result = self.generate_result()

        if result.error is GenerationError.NO_CLASS_SELECTED:
            raise NoCharacterClassSelectedError("At least one character type must be enabled")
        if result.error is GenerationError.LENGTH_TOO_SHORT:
            raise LengthTooShortError(
                f"Length {self.config.length} is too short for "
                f"{len(self.enabled_classes())} character types"
            )

        return result.password

    def _meets_requirements(self, password: str) -> bool:
        """
        Check a password against this generator's configuration.

        Args:
            password: Password to check

        Returns:
            True if the length matches, every enabled class is represented
            and no character falls outside the enabled alphabets
        """
        if len(password) != self.config.length:
            return False

        password_chars = set(password)
        allowed: set = set()

        for entry in self.enabled_classes():
            alphabet = set(entry.alphabet)
            if not password_chars & alphabet:
                return False
            allowed |= alphabet

        return password_chars <= allowed

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types
        """
        info = ", ".join(entry.char_class.value for entry in self.enabled_classes())

        if self.config.avoid_ambiguous:
            info += " (excluding ambiguous chars)"

        return info


def generate_password(length: int = DEFAULT_OPTIONS["length"],
                      *,
                      use_lower: bool = True,
                      use_upper: bool = True,
                      use_digits: bool = True,
                      use_special: bool = True,
                      avoid_ambiguous: bool = True,
                      source: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length
        use_lower: Include lowercase letters
        use_upper: Include uppercase letters
        use_digits: Include digits
        use_special: Include special characters
        avoid_ambiguous: Exclude visually ambiguous characters (O, 0, |)
        source: Uniform random source

    Returns:
        Generated password string, or "" if no password is possible
    """
    config = PasswordConfig(
        length=length,
        use_lower=use_lower,
        use_upper=use_upper,
        use_digits=use_digits,
        use_special=use_special,
        avoid_ambiguous=avoid_ambiguous,
    )

    return PasswordGenerator(config, source).generate()
