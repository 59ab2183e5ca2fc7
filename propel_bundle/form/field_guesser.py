# ==============================================
# ModelFieldGuesser
# ==============================================
#
# PURPOSE:
#   Suggest how a form field for (model class, property) should look
#   by reading the model's table map: which field type, whether the
#   field is required, and its maximum length.
#
# CLASS: ModelFieldGuesser
# ------------------------
#   Stateless apart from the registry it reads table maps from.
#
#   - guess_class(model_class, property) -> ClassGuess
#       RULE 1: RELATION → MODEL_CHOICE (HIGH)
#         multiple unless the relation is ONE_TO_ONE.
#       RULE 2: COLUMN TYPE → field type (see COLUMN_TYPE_GUESSES)
#       RULE 3: EVERYTHING ELSE → TEXT (LOW)
#
#   - guess_required(model_class, property) -> Guess | None
#       Nullable column → Guess(False, HIGH). No suggestion otherwise.
#
#   - guess_max_length(model_class, property) -> Guess | None
#       Column size → Guess(size, HIGH). No suggestion for relations
#       or columns without a size.
#
#   Unknown classes and properties raise (UnknownModelError,
#   ColumnNotFoundError); nothing is caught here.
#
# CLASS: FieldFactory
# -------------------
#   Asks several guessers and keeps the most confident answer.
#
# ==============================================

from typing import Dict, Iterable, List, Optional, Tuple

from ..orm.metadata import RelationType, TableMap
from ..orm.query import ModelRegistry
from .guess import ClassGuess, Confidence, FieldType, Guess


# column type → (field type, confidence)
COLUMN_TYPE_GUESSES: Dict[str, Tuple[FieldType, Confidence]] = {
    "boolean": (FieldType.CHECKBOX, Confidence.HIGH),
    "datetime": (FieldType.DATETIME, Confidence.HIGH),
    "vardatetime": (FieldType.DATETIME, Confidence.HIGH),
    "datetimez": (FieldType.DATETIME, Confidence.HIGH),
    "date": (FieldType.DATE, Confidence.HIGH),
    "decimal": (FieldType.NUMBER, Confidence.MEDIUM),
    "float": (FieldType.NUMBER, Confidence.MEDIUM),
    "integer": (FieldType.INTEGER, Confidence.MEDIUM),
    "bigint": (FieldType.INTEGER, Confidence.MEDIUM),
    "smallint": (FieldType.INTEGER, Confidence.MEDIUM),
    "varchar": (FieldType.TEXT, Confidence.MEDIUM),
    "string": (FieldType.TEXT, Confidence.MEDIUM),
    "text": (FieldType.TEXTAREA, Confidence.MEDIUM),
    "time": (FieldType.TIME, Confidence.HIGH),
}


def relation_name(property_name: str) -> str:
    """Relations are named like classes: "author" -> "Author"."""
    return property_name[:1].upper() + property_name[1:]


class ModelFieldGuesser:
    def __init__(self, registry: ModelRegistry):
        self.registry = registry

    def _table_map(self, model_class: type) -> TableMap:
        return self.registry.get_table_map(model_class)

    def guess_class(self, model_class: type, property_name: str) -> ClassGuess:
        table_map = self._table_map(model_class)

        name = relation_name(property_name)
        if table_map.has_relation(name):
            relation = table_map.get_relation(name)
            options = {
                "class": relation.foreign_class,
                "multiple": relation.type != RelationType.ONE_TO_ONE,
            }
            if relation.foreign_class is not None and relation.foreign_class in self.registry:
                options["query"] = self.registry.query_factory(relation.foreign_class)
            return ClassGuess(
                value=FieldType.MODEL_CHOICE,
                confidence=Confidence.HIGH,
                options=options,
            )

        column_type = table_map.get_column(property_name).type.lower()
        if column_type in COLUMN_TYPE_GUESSES:
            field_type, confidence = COLUMN_TYPE_GUESSES[column_type]
            return ClassGuess(value=field_type, confidence=confidence)

        return ClassGuess(value=FieldType.TEXT, confidence=Confidence.LOW)

    def guess_required(self, model_class: type, property_name: str) -> Optional[Guess]:
        table_map = self._table_map(model_class)

        if table_map.has_relation(relation_name(property_name)):
            return None

        column = table_map.get_column(property_name)
        if not column.is_not_null():
            return Guess(False, Confidence.HIGH)

        # NOT NULL columns get no suggestion
        return None

    def guess_max_length(self, model_class: type, property_name: str) -> Optional[Guess]:
        table_map = self._table_map(model_class)

        if table_map.has_relation(relation_name(property_name)):
            return None

        column = table_map.get_column(property_name)
        if column.size is None:
            return None
        return Guess(column.size, Confidence.HIGH)


class FieldFactory:
    """Combines several guessers; the most confident suggestion wins."""

    def __init__(self, guessers: Iterable[ModelFieldGuesser]):
        self.guessers: List[ModelFieldGuesser] = list(guessers)

    def guess_class(self, model_class: type, property_name: str) -> Optional[ClassGuess]:
        return Guess.best_guess(g.guess_class(model_class, property_name) for g in self.guessers)

    def guess_required(self, model_class: type, property_name: str) -> Optional[Guess]:
        return Guess.best_guess(g.guess_required(model_class, property_name) for g in self.guessers)

    def guess_max_length(self, model_class: type, property_name: str) -> Optional[Guess]:
        return Guess.best_guess(g.guess_max_length(model_class, property_name) for g in self.guessers)

    def get_options(self, model_class: type, property_name: str) -> dict:
        """Field options suggested for (model_class, property_name), type included."""
        class_guess = self.guess_class(model_class, property_name)
        options = dict(class_guess.options) if class_guess else {}

        required = self.guess_required(model_class, property_name)
        if required is not None:
            options["required"] = required.value

        max_length = self.guess_max_length(model_class, property_name)
        if max_length is not None:
            options["max_length"] = max_length.value

        return {
            "type": class_guess.field_type if class_guess else FieldType.TEXT,
            "options": options,
        }
