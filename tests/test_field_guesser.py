# ==============================================
# Tests for ModelFieldGuesser and FieldFactory
# ==============================================

import pytest

from propel_bundle.form import ClassGuess, Confidence, FieldFactory, FieldType, Guess, ModelFieldGuesser
from propel_bundle.orm import ColumnNotFoundError, UnknownModelError

from .conftest import Author, Book, Tag


@pytest.fixture
def guesser(registry):
    return ModelFieldGuesser(registry)


class TestGuessClass:
    """Tests for field type guessing."""

    def test_many_to_one_relation(self, guesser, registry):
        guess = guesser.guess_class(Book, "author")

        assert guess.field_type == FieldType.MODEL_CHOICE
        assert guess.confidence == Confidence.HIGH
        assert guess.options["class"] is Author
        assert guess.options["multiple"] is True
        assert guess.options["query"] is registry.query_factory(Author)

    def test_many_to_many_relation_is_multiple(self, guesser):
        guess = guesser.guess_class(Book, "tag")
        assert guess.options["class"] is Tag
        assert guess.options["multiple"] is True

    def test_one_to_one_relation_is_not_multiple(self, guesser):
        guess = guesser.guess_class(Book, "cover")
        assert guess.options["multiple"] is False
        assert "query" not in guess.options

    @pytest.mark.parametrize("property_name, field_type, confidence", [
        ("is_published", FieldType.CHECKBOX, Confidence.HIGH),
        ("published_at", FieldType.DATETIME, Confidence.HIGH),
        ("release_date", FieldType.DATE, Confidence.HIGH),
        ("reading_time", FieldType.TIME, Confidence.HIGH),
        ("price", FieldType.NUMBER, Confidence.MEDIUM),
        ("pages", FieldType.INTEGER, Confidence.MEDIUM),
        ("title", FieldType.TEXT, Confidence.MEDIUM),
        ("body", FieldType.TEXTAREA, Confidence.MEDIUM),
    ])
    def test_column_types(self, guesser, property_name, field_type, confidence):
        guess = guesser.guess_class(Book, property_name)
        assert guess.field_type == field_type
        assert guess.confidence == confidence

    def test_unmatched_type_falls_back_to_text(self, guesser):
        guess = guesser.guess_class(Book, "summary")
        assert guess.field_type == FieldType.TEXT
        assert guess.confidence == Confidence.LOW

    def test_unknown_property_propagates(self, guesser):
        with pytest.raises(ColumnNotFoundError):
            guesser.guess_class(Book, "isbn")

    def test_unknown_class_propagates(self, guesser):
        with pytest.raises(UnknownModelError):
            guesser.guess_class(object, "id")


class TestGuessRequired:
    """Tests for required-flag guessing."""

    def test_nullable_column_not_required(self, guesser):
        assert guesser.guess_required(Book, "summary") == Guess(False, Confidence.HIGH)

    def test_not_null_column_has_no_guess(self, guesser):
        assert guesser.guess_required(Book, "title") is None

    def test_relation_has_no_guess(self, guesser):
        assert guesser.guess_required(Book, "author") is None


class TestGuessMaxLength:
    """Tests for max-length guessing."""

    def test_column_size(self, guesser):
        assert guesser.guess_max_length(Book, "title") == Guess(255, Confidence.HIGH)

    def test_column_without_size(self, guesser):
        assert guesser.guess_max_length(Book, "price") is None

    def test_relation_has_no_guess(self, guesser):
        assert guesser.guess_max_length(Book, "author") is None


class FixedGuesser:
    """Suggests the same things for every property."""

    def __init__(self, class_guess, required=None, max_length=None):
        self.class_guess = class_guess
        self.required = required
        self.max_length = max_length

    def guess_class(self, model_class, property_name):
        return self.class_guess

    def guess_required(self, model_class, property_name):
        return self.required

    def guess_max_length(self, model_class, property_name):
        return self.max_length


class TestFieldFactory:
    """Tests for combining guessers."""

    def test_best_guess_wins(self, guesser):
        override = FixedGuesser(ClassGuess(FieldType.TEXTAREA, Confidence.HIGH))
        factory = FieldFactory([guesser, override])

        # summary: LOW text from the model guesser, HIGH textarea from the override
        assert factory.guess_class(Book, "summary").field_type == FieldType.TEXTAREA

    def test_tie_keeps_first(self):
        first = Guess(10, Confidence.MEDIUM)
        second = Guess(20, Confidence.MEDIUM)
        assert Guess.best_guess([None, first, second]) is first
        assert Guess.best_guess([None]) is None

    def test_get_options(self, guesser):
        factory = FieldFactory([guesser])

        title = factory.get_options(Book, "title")
        assert title == {"type": FieldType.TEXT, "options": {"max_length": 255}}

        summary = factory.get_options(Book, "summary")
        assert summary == {"type": FieldType.TEXT, "options": {"required": False}}
