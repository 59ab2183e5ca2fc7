from typing import Iterable, List


class FormError(Exception):
    """Base class for form configuration and processing errors."""


class InvalidOptionsError(FormError):
    """Raised when a field receives options it does not declare."""

    def __init__(self, options: Iterable[str]):
        self.options = sorted(options)
        super().__init__(f'The options "{", ".join(self.options)}" do not exist')


class MissingOptionsError(FormError):
    """Raised when a required option was not passed."""

    def __init__(self, options: Iterable[str]):
        self.options = sorted(options)
        super().__init__(f'The options "{", ".join(self.options)}" are missing')


class InvalidPropertyError(FormError):
    """Raised when a property path cannot be read from an object."""


class TransformationFailedError(FormError):
    """
    A submitted value could not be converted into the field's data.

    This is recoverable: Field.bind() records it as a field error.
    """

    def __init__(self, message: str, keys: Iterable = ()):
        super().__init__(message)
        self.keys: List = list(keys)
