# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared models, an in-memory query and a registry for the form tests.
#
# ==============================================

import pytest

from propel_bundle.orm import ColumnMap, ModelRegistry, RelationMap, RelationType, TableMap


class Tag:
    def __init__(self, id=None, name=""):
        self.id = id
        self.name = name

    def __str__(self):
        return f"#{self.name}"

    def __repr__(self):
        return f"Tag({self.id!r}, {self.name!r})"


class Translation:
    """Identified by (locale, key)."""

    def __init__(self, locale, key, text=""):
        self.locale = locale
        self.key = key
        self.text = text

    def __str__(self):
        return f"{self.locale}:{self.key}"


class Author:
    def __init__(self, id=None, name=""):
        self.id = id
        self.name = name


class Book:
    def __init__(self, id=None, title=""):
        self.id = id
        self.title = title


class InMemoryQuery:
    """ModelQuery over a list, counting how often it hits 'the database'."""

    def __init__(self, table_map, models):
        self.table_map = table_map
        self.models = models
        self.find_calls = 0
        self.find_pk_calls = 0

    def get_table_map(self):
        return self.table_map

    def find(self):
        self.find_calls += 1
        return list(self.models)

    def find_pk(self, key):
        self.find_pk_calls += 1
        for model in self.models:
            if str(model.id) == str(key):
                return model
        return None


def tag_table_map():
    return TableMap("tag", model_class=Tag, columns=[
        ColumnMap("id", "integer", is_nullable=False, is_primary_key=True),
        ColumnMap("name", "varchar", size=64, is_nullable=False),
    ])


def translation_table_map():
    return TableMap("translation", model_class=Translation, columns=[
        ColumnMap("locale", "varchar", size=5, is_nullable=False, is_primary_key=True),
        ColumnMap("key", "varchar", size=255, is_nullable=False, is_primary_key=True),
        ColumnMap("text", "text", is_nullable=True),
    ])


def book_table_map():
    return TableMap(
        "book",
        model_class=Book,
        columns=[
            ColumnMap("id", "INTEGER", is_nullable=False, is_primary_key=True),
            ColumnMap("title", "VARCHAR", size=255, is_nullable=False),
            ColumnMap("summary", "LONGVARCHAR", is_nullable=True),
            ColumnMap("body", "text", is_nullable=True),
            ColumnMap("is_published", "boolean", is_nullable=False),
            ColumnMap("published_at", "datetime", is_nullable=True),
            ColumnMap("release_date", "date", is_nullable=True),
            ColumnMap("reading_time", "time", is_nullable=True),
            ColumnMap("price", "decimal", is_nullable=True),
            ColumnMap("pages", "smallint", is_nullable=True),
            ColumnMap("author_id", "integer", is_nullable=True),
        ],
        relations=[
            RelationMap("Author", RelationType.MANY_TO_ONE, "author", Author, ["author_id"], ["id"]),
            RelationMap("Tag", RelationType.MANY_TO_MANY, "tag", Tag),
            RelationMap("Cover", RelationType.ONE_TO_ONE, "cover"),
        ],
    )


@pytest.fixture
def tags():
    return [Tag(1, "python"), Tag(2, "orm"), Tag(3, "forms")]


@pytest.fixture
def tag_query(tags):
    return InMemoryQuery(tag_table_map(), tags)


@pytest.fixture
def translations():
    return [
        Translation("en", "hello", "Hello"),
        Translation("fr", "hello", "Bonjour"),
        Translation("de", "hello", "Hallo"),
    ]


@pytest.fixture
def translation_query(translations):
    return InMemoryQuery(translation_table_map(), translations)


@pytest.fixture
def registry(tag_query):
    registry = ModelRegistry()
    registry.register(Tag, lambda: tag_query)
    registry.register(Book, lambda: InMemoryQuery(book_table_map(), []))
    registry.register(Author, lambda: InMemoryQuery(TableMap("author", model_class=Author), []))
    return registry
