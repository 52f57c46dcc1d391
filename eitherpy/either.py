from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ._utils import abstract_class_check
from .errors import WrongVariantError

if TYPE_CHECKING:
    from .reads import Reads

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
T = TypeVar("T")


class Either(Generic[L, R]):
    """A disjoint union of Left and Right, biased to the right.

    ``map`` and ``flat_map`` only run on a Right; a Left passes through
    untouched (the very same instance is returned). This is close to an
    Option (``Left : None :: Right : Some``) except that a Left also holds a
    value.

    An Either never holds two values: it holds one, tagged Left or Right.
    Only the two variants may be constructed.

    Example:
        ```python
        Right("Barry").map(lambda n: n + " Bonds")
        # => Right('Barry Bonds')

        Left("nope").map(lambda n: n + " Bonds")
        # => Left('nope'), same instance
        ```
    """

    value: Any

    def __new__(cls, *args: Any, **kwargs: Any):
        inst = super().__new__(cls)
        abstract_class_check(inst, Either, "Either")
        return inst

    def is_left(self) -> bool: return isinstance(self, Left)
    def is_right(self) -> bool: return isinstance(self, Right)

    def unsafe_get_right(self) -> R:
        if self.is_right():
            return self.value
        raise WrongVariantError("unsafe_get_right", self)

    def unsafe_get_left(self) -> L:
        if self.is_left():
            return self.value
        raise WrongVariantError("unsafe_get_left", self)

    def map(self, f: Callable[[R], R2]) -> "Either[L, R2]":
        if self.is_right():
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        """Chain a computation that may itself switch to Left.

        Example:
            ```python
            Right("Chuck").flat_map(lambda n: Right(n + " Norris"))
            # => Right('Chuck Norris')
            ```
        """
        if self.is_right():
            return f(self.value)
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L], L2]) -> "Either[L2, R]":
        if self.is_left():
            return Left(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map_left(self, f: Callable[[L], "Either[L2, R]"]) -> "Either[L2, R]":
        if self.is_left():
            return f(self.value)
        return self  # type: ignore[return-value]

    def to_right(self) -> "Right[L, Any]":
        return Right(self.value)

    def to_left(self) -> "Left[Any, R]":
        return Left(self.value)

    def flip(self) -> "Either[R, L]":
        return self.to_right() if self.is_left() else self.to_left()

    def get_or_else(self, f: Callable[[L], R]) -> R:
        """Return the Right value, or recover from the Left value with ``f``."""
        if self.is_right():
            return self.unsafe_get_right()
        return f(self.unsafe_get_left())

    def match(self, left: Callable[[L], T], right: Callable[[R], T]) -> T:
        """Run exactly one handler, picked by the variant.

        Same thing as chaining ``map`` and ``get_or_else``.

        Example:
            ```python
            Right(3).match(left=lambda _: 0, right=lambda a: a + 5)
            # => 8
            ```
        """
        return self.map(right).get_or_else(left)  # type: ignore[arg-type]

    def to_json(self) -> Any:
        return self.value

    @staticmethod
    def unit(v: R2) -> "Right[Any, R2]":
        return Right(v)

    @staticmethod
    def as_(read_left: "Reads[L2]", read_right: "Reads[R2]") -> "Reads[Either[L2, R2]]":
        """Read an Either given a reader for each side.

        The right reader runs first and its success is lifted into ``Right``.
        When it fails, its failure is dropped and the left reader's result for
        the same input is returned unchanged.

        Example:
            ```python
            read_as_error = Reads.unit(lambda v: Right.unit(ValueError(v)))
            Either.as_(read_as_error, number).get_value(5)
            # => Right(Right(5))
            ```
        """
        from .reads import Reads

        def run(v: Any) -> "Either[Any, Any]":
            return (
                read_right
                .map(Right.unit)
                .get_value(v)
                .flat_map_left(lambda _: read_left.get_value(v))
            )

        return Reads(run)


@dataclass(frozen=True, repr=False)
class Left(Either[L, R]):
    value: L

    def __str__(self) -> str: return f"Left({self.value})"
    def __repr__(self) -> str: return f"Left({self.value!r})"

    @staticmethod
    def unit(v: L2) -> "Left[L2, Any]":
        return Left(v)


@dataclass(frozen=True, repr=False)
class Right(Either[L, R]):
    value: R

    def __str__(self) -> str: return f"Right({self.value})"
    def __repr__(self) -> str: return f"Right({self.value!r})"

    @staticmethod
    def unit(v: R2) -> "Right[Any, R2]":
        return Right(v)


def json_default(o: Any) -> Any:
    """``default=`` hook for ``json.dumps`` that erases the Either tag.

    Any other object exposing ``to_json()`` is converted the same way.
    """
    if isinstance(o, Either) or callable(getattr(o, "to_json", None)):
        return o.to_json()
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")
