from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

from .either import Either, Left, Right
from .errors import ValidationError
from .logger import ConsoleLogger

A = TypeVar("A")
B = TypeVar("B")


class Reads(Generic[A]):
    """A validating reader: evaluates an input value into an Either.

    A reader wraps a function returning ``Right(parsed)`` on success and
    ``Left(failure)`` otherwise. Readers compose like the Either they yield,
    and every combinator returns a new reader.

    Args:
        run: Function from the raw input to an Either

    Example:
        ```python
        positive = number.flat_map(
            lambda n: Right(n) if n > 0 else Left(ValidationError("not positive", n))
        )
        positive.get_value(3)   # => Right(3)
        positive.get_value(-1)  # => Left(ValidationError('not positive', value=-1))
        ```
    """

    def __init__(self, run: Callable[[Any], Either[Any, A]]): self._run_impl = run

    @staticmethod
    def unit(run: Callable[[Any], Either[Any, B]]) -> "Reads[B]":
        return Reads(run)

    def get_value(self, v: Any) -> Either[Any, A]:
        return self._run_impl(v)

    def map(self, f: Callable[[A], B]) -> "Reads[B]":
        return Reads(lambda v: self.get_value(v).map(f))

    def flat_map(self, f: Callable[[A], Either[Any, B]]) -> "Reads[B]":
        return Reads(lambda v: self.get_value(v).flat_map(f))

    def map_left(self, f: Callable[[Any], Any]) -> "Reads[A]":
        return Reads(lambda v: self.get_value(v).map_left(f))

    def flat_map_left(self, f: Callable[[Any], Either[Any, A]]) -> "Reads[A]":
        return Reads(lambda v: self.get_value(v).flat_map_left(f))

    def or_else(self, other: "Reads[B]") -> "Reads[A | B]":
        # other sees the original input, not this reader's failure
        return Reads(lambda v: self.get_value(v).flat_map_left(lambda _: other.get_value(v)))

    def logged(self, logger: ConsoleLogger, name: str = "reads") -> "Reads[A]":
        """Report failed evaluations to ``logger`` at DEBUG level."""
        log = logger.bind(reader=name)

        def run(v: Any) -> Either[Any, A]:
            res = self.get_value(v)
            if res.is_left():
                log.debug("read failed", input=v, error=res)
            return res

        return Reads(run)


def _check(pred: Callable[[Any], bool], message: str) -> Reads[Any]:
    def run(v: Any) -> Either[ValidationError, Any]:
        if pred(v):
            return Right(v)
        return Left(ValidationError(message, v))
    return Reads(run)


number: Reads[Any] = _check(
    lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "expected a number",
)
string: Reads[str] = _check(lambda v: isinstance(v, str), "expected a string")
boolean: Reads[bool] = _check(lambda v: isinstance(v, bool), "expected a boolean")


def nullable(reads: Reads[A]) -> "Reads[A | None]":
    return Reads(lambda v: Right(None) if v is None else reads.get_value(v))
