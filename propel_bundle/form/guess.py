# ==============================================
# Guesses (Data Classes)
# ==============================================
#
# PURPOSE:
#   The OUTPUT of field guessing. Every suggestion carries a
#   confidence so that suggestions from several guessers can be
#   compared; the most confident one wins.
#
# ENUMS:
# ------
# - Confidence(IntEnum): LOW < MEDIUM < HIGH
# - FieldType(Enum): the field types a guesser can suggest
#
# CLASSES:
# --------
# - Guess (dataclass)        value + confidence
# - ClassGuess (dataclass)   field_type + options + confidence
#
# ==============================================

from enum import Enum, IntEnum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional


class Confidence(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class FieldType(Enum):
    CHECKBOX = "checkbox"
    DATETIME = "datetime"
    DATE = "date"
    NUMBER = "number"
    INTEGER = "integer"
    TEXT = "text"
    TEXTAREA = "textarea"
    TIME = "time"
    MODEL_CHOICE = "model_choice"


@dataclass
class Guess:
    """A suggested value and how sure the guesser is about it."""

    value: Any
    confidence: Confidence

    @staticmethod
    def best_guess(guesses: Iterable[Optional["Guess"]]) -> Optional["Guess"]:
        """
        Return the guess with the highest confidence.

        None entries are ignored. On equal confidence the earlier guess wins.
        """
        best = None
        for guess in guesses:
            if guess is None:
                continue
            if best is None or guess.confidence > best.confidence:
                best = guess
        return best


@dataclass
class ClassGuess(Guess):
    """A suggested field type together with the options to build it."""

    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def field_type(self) -> FieldType:
        return self.value
