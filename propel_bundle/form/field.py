# ==============================================
# Field (base class)
# ==============================================
#
# PURPOSE:
#   Options handling and the data lifecycle shared by all fields.
#
# OPTIONS:
# --------
#   Subclasses declare their options in configure() with
#   add_option(name, default) / add_required_option(name). The options
#   passed to the constructor are checked against the declarations:
#     - unknown option          → InvalidOptionsError
#     - required option missing → MissingOptionsError
#
# DATA LIFECYCLE:
# ---------------
#   set_data(data)        data = process_data(data)
#   get_display_data()    transform(data)  → what the form renders
#   bind(submitted)       data = process_data(reverse_transform(submitted))
#                         A TransformationFailedError is recorded in
#                         errors and leaves the data untouched.
#
# ==============================================

from typing import Any, Dict, List, Optional, Set

from .exceptions import InvalidOptionsError, MissingOptionsError, TransformationFailedError


class Field:
    def __init__(self, key: str, options: Optional[Dict[str, Any]] = None):
        self.key = key
        self.data: Any = None
        self.submitted_data: Any = None
        self.errors: List[str] = []
        self.bound = False

        self._passed_options: Dict[str, Any] = dict(options or {})
        self._defaults: Dict[str, Any] = {}
        self._required_options: Set[str] = set()

        self.configure()

        unknown = set(self._passed_options) - set(self._defaults)
        if unknown:
            raise InvalidOptionsError(unknown)

        missing = self._required_options - set(self._passed_options)
        if missing:
            raise MissingOptionsError(missing)

    def configure(self) -> None:
        self.add_option("required", True)

    def add_option(self, name: str, default: Any = None) -> None:
        self._defaults[name] = default
        self._required_options.discard(name)

    def add_required_option(self, name: str) -> None:
        self._defaults[name] = None
        self._required_options.add(name)

    def get_option(self, name: str) -> Any:
        if name in self._passed_options:
            return self._passed_options[name]
        return self._defaults[name]

    def get_options(self) -> Dict[str, Any]:
        return {name: self.get_option(name) for name in self._defaults}

    def is_required(self) -> bool:
        return bool(self.get_option("required"))

    def set_data(self, data: Any) -> None:
        self.data = self.process_data(data)

    def get_data(self) -> Any:
        return self.data

    def get_display_data(self) -> Any:
        return self.transform(self.data)

    def bind(self, submitted: Any) -> None:
        self.bound = True
        self.submitted_data = submitted
        self.errors = []
        try:
            data = self.reverse_transform(submitted)
        except TransformationFailedError as e:
            self.errors.append(str(e))
            return
        self.data = self.process_data(data)

    def is_valid(self) -> bool:
        return self.bound and not self.errors

    def process_data(self, data: Any) -> Any:
        return data

    def transform(self, value: Any) -> Any:
        return "" if value is None else value

    def reverse_transform(self, value: Any) -> Any:
        return None if value == "" else value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"
