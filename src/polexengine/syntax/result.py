"""Tagged results shared by the tokenizer, parser and facade.

Errors inside the syntax layer are values, not exceptions: every stage
returns ``Ok`` or ``Err`` and callers dispatch with ``match``::

    match tokenize(text):
        case Ok(tokens):
            ...
        case Err(line, reason):
            print(f"{line}: {reason}")

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from polexengine.diagnostics import Diagnostic

__all__ = ["Err", "IOFailure", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful stage result.

    Type Parameters:
        T: The type of the produced value

    Example:
        >>> Ok((1, 2)).value
        (1, 2)
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Lexical or structural error: a ``(line, reason)`` pair.

    Iterating yields exactly ``line`` and ``reason``, so an error unpacks like
    the pair it models. The diagnostic rides along for tooling but takes no
    part in equality.

    Example:
        >>> err = Err(1, "unknown keyword 'foo'")
        >>> line, reason = err
        >>> tuple(err)
        (1, "unknown keyword 'foo'")
    """

    line: int
    reason: str
    diagnostic: Diagnostic | None = field(default=None, compare=False, repr=False)

    __match_args__ = ("line", "reason")

    def __post_init__(self) -> None:
        """Validate line invariant.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed).
        """
        if self.line < 1:
            msg = f"Err.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)

    def __iter__(self) -> Iterator[int | str]:
        yield self.line
        yield self.reason

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "Err":
        """Build an error value from a line-bearing diagnostic.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate

        Returns:
            Err carrying the diagnostic's line and message
        """
        if diagnostic.line is None:
            msg = f"Diagnostic {diagnostic.code.name} has no line"
            raise ValueError(msg)
        return cls(diagnostic.line, diagnostic.message, diagnostic)


@dataclass(frozen=True, slots=True)
class IOFailure:
    """Catalog could not be read: a 1-tuple ``(reason,)``.

    Distinguished from ``Err`` by shape, never produced by the syntax layer.

    Attributes:
        reason: Lowercase errno name, e.g. ``"enoent"``
        path: Catalog path (excluded from equality)
        error: Underlying OSError (excluded from equality)
    """

    reason: str
    path: str = field(default="", compare=False)
    error: OSError | None = field(default=None, compare=False, repr=False)

    __match_args__ = ("reason",)

    def __iter__(self) -> Iterator[str]:
        yield self.reason


type Result[T] = Ok[T] | Err
"""Outcome of a syntax stage."""
