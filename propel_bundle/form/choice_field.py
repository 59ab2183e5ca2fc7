from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import TransformationFailedError
from .field import Field


def iter_items(source: Iterable[Any]) -> Iterator[Tuple[Any, Any]]:
    """(key, value) pairs of a mapping, or (position, value) of a sequence."""
    if isinstance(source, Mapping):
        return iter(source.items())
    return enumerate(source)


class ChoiceField(Field):
    """
    A field for selecting one or more keys from a fixed set of choices.

    Options:
        choices:  Mapping of key → label, a sequence of labels (keyed by
                  position) or a callable returning either. Required.
        multiple: Whether several keys may be selected.

    Keys are strings on both sides of the transformation, as they are
    when submitted.
    """

    def __init__(self, key: str, options: Optional[Dict[str, Any]] = None):
        self._initialized_choices: Optional[Dict[str, Any]] = None
        super().__init__(key, options)

    def configure(self) -> None:
        self.add_required_option("choices")
        self.add_option("multiple", False)
        super().configure()

    def is_multiple(self) -> bool:
        return bool(self.get_option("multiple"))

    def initialize_choices(self) -> None:
        if self._initialized_choices is None:
            self._initialized_choices = self.get_initialized_choices()

    def get_initialized_choices(self) -> Any:
        choices = self.get_option("choices")
        if callable(choices):
            choices = choices()
        return choices

    def get_choices(self) -> Dict[str, Any]:
        self.initialize_choices()
        return {str(key): label for key, label in iter_items(self._initialized_choices or {})}

    def transform(self, value: Any) -> Any:
        if self.is_multiple():
            if value is None or value == "":
                return []
            if isinstance(value, (str, int)):
                return [str(value)]
            return [str(item) for item in value]

        if value is None or value == "":
            return ""
        return str(value)

    def reverse_transform(self, value: Any) -> Any:
        if value is None or value == "":
            return None

        if isinstance(value, (list, tuple)):
            if not self.is_multiple():
                raise TransformationFailedError("Expected a single choice key, got a list")
            keys = [str(item) for item in value if item is not None and item != ""]
            return keys or None

        if self.is_multiple():
            return [str(value)]
        return str(value)
