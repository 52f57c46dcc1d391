from __future__ import annotations
from typing import Any, Dict


class EitherError(Exception):
    """Base class for every error raised by eitherpy."""


class AbstractInstantiationError(EitherError, TypeError):
    def __init__(self, name: str):
        super().__init__(f"Cannot instantiate abstract class {name} directly")
        self.name = name


class WrongVariantError(EitherError, ValueError):
    """Raised by the unsafe accessors when called on the other variant.

    Prefer ``map``, ``get_or_else`` or ``match`` for safe access.
    """

    def __init__(self, accessor: str, instance: Any):
        kind = type(instance).__name__
        super().__init__(f"Performed {accessor} on a {kind}")
        self.accessor = accessor
        self.instance = instance


class ValidationError(EitherError):
    # Carried as a Left payload by readers; never raised by the library.
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, value={self.value!r})"

    def to_json(self) -> Dict[str, Any]:
        return {"message": self.message, "value": self.value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.message == other.message and self.value == other.value

    def __hash__(self) -> int:
        try:
            return hash((self.message, self.value))
        except TypeError:
            # equal instances share a message, so this stays consistent with __eq__
            return hash(self.message)
