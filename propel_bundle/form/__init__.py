# ==============================================
# FORM: model-backed fields and field guessing
# ==============================================
#
# Modules:
# --------
# - field.py               → Field base: options, data / bind lifecycle
# - choice_field.py        → ChoiceField
# - model_choice_field.py  → ModelChoiceField (stored models as choices)
# - collection.py          → ArrayCollection + in-place reconcile()
# - property_path.py       → Dotted property paths
# - guess.py               → Guess / ClassGuess / Confidence / FieldType
# - field_guesser.py       → ModelFieldGuesser, FieldFactory
# - exceptions.py          → Form errors
#
# ==============================================

from .collection import ArrayCollection, MutableCollection, reconcile
from .choice_field import ChoiceField
from .exceptions import (
    FormError,
    InvalidOptionsError,
    InvalidPropertyError,
    MissingOptionsError,
    TransformationFailedError,
)
from .field import Field
from .field_guesser import FieldFactory, ModelFieldGuesser
from .guess import ClassGuess, Confidence, FieldType, Guess
from .model_choice_field import ModelChoiceField
from .property_path import PropertyPath

__all__ = [
    "ArrayCollection",
    "MutableCollection",
    "reconcile",
    "ChoiceField",
    "FormError",
    "InvalidOptionsError",
    "InvalidPropertyError",
    "MissingOptionsError",
    "TransformationFailedError",
    "Field",
    "FieldFactory",
    "ModelFieldGuesser",
    "ClassGuess",
    "Confidence",
    "FieldType",
    "Guess",
    "ModelChoiceField",
    "PropertyPath",
]
