# ==============================================
# Queries & Model Registry
# ==============================================
#
# PURPOSE:
#   The forms never build query class names at runtime. Instead
#   every model class is registered together with a factory that
#   returns a fresh query bound to it, and that factory is handed
#   to whoever needs to load models.
#
# PROTOCOL: ModelQuery
# --------------------
#   - find() -> list            → all models of the bound class
#   - find_pk(key) -> model | None
#   - get_table_map() -> TableMap
#
# CLASS: ModelRegistry
# --------------------
#   - register(model_class, query_factory)
#   - query_factory(model_class) -> Callable[[], ModelQuery]
#   - create_query(model_class) -> ModelQuery
#   - get_table_map(model_class) -> TableMap
#
# ==============================================

from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from .metadata import TableMap


class NoResultError(LookupError):
    """Raised when a lookup by key does not match any stored model."""


class UnknownModelError(LookupError):
    """Raised when a model class was never registered."""

    def __init__(self, model_class: Any):
        name = getattr(model_class, "__qualname__", repr(model_class))
        super().__init__(f'No query registered for model class "{name}"')
        self.model_class = model_class


class ModelQuery(Protocol):
    def find(self) -> Iterable[Any]:
        ...

    def find_pk(self, key: Any) -> Optional[Any]:
        ...

    def get_table_map(self) -> TableMap:
        ...


QueryFactory = Callable[[], ModelQuery]


class ModelRegistry:
    """Maps model classes to the factories that build their queries."""

    def __init__(self):
        self._factories: Dict[type, QueryFactory] = {}

    def register(self, model_class: type, query_factory: QueryFactory) -> None:
        self._factories[model_class] = query_factory

    def __contains__(self, model_class: type) -> bool:
        return model_class in self._factories

    def query_factory(self, model_class: type) -> QueryFactory:
        try:
            return self._factories[model_class]
        except KeyError:
            raise UnknownModelError(model_class) from None

    def create_query(self, model_class: type) -> ModelQuery:
        return self.query_factory(model_class)()

    def get_table_map(self, model_class: type) -> TableMap:
        return self.create_query(model_class).get_table_map()
