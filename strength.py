import string
from enum import Enum

# =========================================
# CHARACTER SETS
# =========================================

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
# One symbol set for both checking and generating passwords
SYMBOLS = '!@#$%^&*(),.?":{}|<>_+[]'

STRONG_MIN_LENGTH = 12
INTERMEDIATE_MIN_LENGTH = 8


class InvalidLevelError(ValueError):
    """Raised when free-form text does not name a strength level."""

    def __init__(self, text):
        self.text = text
        choices = ", ".join(level.value for level in StrengthLevel)
        super().__init__(f"Invalid level: {text}. Choose one of: {choices}")


class StrengthLevel(Enum):
    LOW = "low"
    INTERMEDIATE = "intermediate"
    STRONG = "strong"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# =========================================
# CLASSIFICATION
# =========================================

def _contains_any(password: str, charset: str) -> bool:
    return any(c in charset for c in password)


def character_classes(password: str) -> dict:
    """Which character classes appear in the password."""
    return {
        "upper": _contains_any(password, UPPERCASE),
        "lower": _contains_any(password, LOWERCASE),
        "digit": _contains_any(password, DIGITS),
        "symbol": _contains_any(password, SYMBOLS),
    }


def classify(password: str) -> StrengthLevel:
    """
    Strong: 12+ chars with upper, lower, digit and symbol.
    Intermediate: 8+ chars with lower and digit.
    Anything else is Low.
    """
    classes = character_classes(password)

    if len(password) >= STRONG_MIN_LENGTH and all(classes.values()):
        return StrengthLevel.STRONG
    if len(password) >= INTERMEDIATE_MIN_LENGTH and classes["lower"] and classes["digit"]:
        return StrengthLevel.INTERMEDIATE
    return StrengthLevel.LOW


def suggestions(password: str) -> list:
    """Hints for reaching the next tier up. Empty for strong passwords."""
    level = classify(password)
    if level is StrengthLevel.STRONG:
        return []

    classes = character_classes(password)
    hints = []

    if level is StrengthLevel.LOW:
        if len(password) < INTERMEDIATE_MIN_LENGTH:
            hints.append(f"Use at least {INTERMEDIATE_MIN_LENGTH} characters")
        if not classes["lower"]:
            hints.append("Add lowercase letters")
        if not classes["digit"]:
            hints.append("Add digits")
        return hints

    # Intermediate -> Strong
    if len(password) < STRONG_MIN_LENGTH:
        hints.append(f"Use at least {STRONG_MIN_LENGTH} characters")
    if not classes["upper"]:
        hints.append("Add uppercase letters")
    if not classes["symbol"]:
        hints.append(f"Add a symbol from {SYMBOLS}")
    return hints


def parse_level(text: str) -> StrengthLevel:
    """Case-insensitive lookup of a level name, e.g. 'Strong' or ' low '."""
    try:
        return StrengthLevel(str(text).strip().lower())
    except ValueError:
        raise InvalidLevelError(text) from None
