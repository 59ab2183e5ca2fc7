from typing import Any, Callable, List, Mapping

from .exceptions import InvalidPropertyError


class PropertyPath:
    """
    A dotted path such as "author.name" resolved against an object.

    Each element is read from a mapping by key, otherwise as an attribute.
    The path is split once, when the field is configured.
    """

    def __init__(self, path: str):
        if not path or any(not element for element in path.split(".")):
            raise InvalidPropertyError(f'Invalid property path "{path}"')
        self.path = path
        self.elements: List[str] = path.split(".")
        self._getters: List[Callable[[Any], Any]] = [self._getter(element) for element in self.elements]

    @staticmethod
    def _getter(element: str) -> Callable[[Any], Any]:
        def get(obj: Any) -> Any:
            if isinstance(obj, Mapping):
                return obj[element]
            return getattr(obj, element)
        return get

    def get_value(self, obj: Any) -> Any:
        value = obj
        for element, getter in zip(self.elements, self._getters):
            if value is None:
                return None
            try:
                value = getter(value)
            except (AttributeError, KeyError):
                raise InvalidPropertyError(
                    f'Cannot read "{element}" of path "{self.path}" from {type(value).__name__}'
                ) from None
        return value

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"PropertyPath({self.path!r})"
