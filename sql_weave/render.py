from collections.abc import Sequence
from typing import Any, Optional

from .errors import (
    IncorrectVerb,
    LonelyModifier,
    MixedPlaceholders,
    NonCollectionArgument,
    NonNumericArgument,
    TooFewArguments,
    TooManyArguments,
    UnsupportedVerb,
)
from .escape import debug_literal, is_finite_number
from .types import PLACEHOLDER_VERBS, VALUE_VERBS, Dialect


def as_sequence(value: Any) -> Sequence[Any]:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise NonCollectionArgument(f"got {type(value).__name__}")
    return value


class Renderer:
    """Renders fragments into SQL text, collecting bound values in ``args``.

    One renderer holds the state of a single build: the bound values, the
    running placeholder counter and the dialect fixed by the first
    placeholder verb.
    """

    def __init__(self) -> None:
        self.args: list[Any] = []
        self.counter = 0
        self.dialect: Optional[Dialect] = None

    def write_fragment(self, out: list[str], fmt: str, values: Sequence[Any]) -> None:
        pos = 0
        next_value = 0
        while True:
            idx = fmt.find("%", pos)
            if idx == -1:
                out.append(fmt[pos:])
                break
            out.append(fmt[pos:idx])
            pos = idx + 1
            if pos == len(fmt):
                raise LonelyModifier("'%' at end of fragment")

            verb = fmt[pos]
            pos += 1
            modifier = ""
            if verb == "%":
                out.append("%")
                continue
            elif verb == " ":
                raise LonelyModifier("'%' followed by a space")
            elif verb in "+#":
                if pos == len(fmt) or fmt[pos] not in PLACEHOLDER_VERBS:
                    raise IncorrectVerb(f"{verb!r} requires additional '$', '?' or '@'")
                modifier, verb = verb, fmt[pos]
                pos += 1
            elif verb not in VALUE_VERBS:
                raise UnsupportedVerb(f"{verb!r} is not supported")

            if next_value >= len(values):
                raise TooFewArguments(
                    f"have {len(values)} args, want {next_value + 1}"
                )
            value = values[next_value]
            next_value += 1

            if modifier == "#":
                self.write_batch(out, verb, value)
            elif modifier == "+":
                self.write_slice(out, verb, value)
            else:
                self.write_value(out, verb, value)

        if next_value != len(values):
            raise TooManyArguments(f"have {len(values)} args, expected {next_value}")

    def write_batch(self, out: list[str], verb: str, value: Any) -> None:
        # every row is checked before anything is bound
        rows = [as_sequence(row) for row in as_sequence(value)]
        for i, row in enumerate(rows):
            if i:
                out.append(", ")
            out.append("(")
            self.write_slice(out, verb, row)
            out.append(")")

    def write_slice(self, out: list[str], verb: str, value: Any) -> None:
        for i, item in enumerate(as_sequence(value)):
            if i:
                out.append(", ")
            self.write_value(out, verb, item)

    def write_value(self, out: list[str], verb: str, value: Any) -> None:
        if verb == "s":
            out.append("" if value is None else str(value))
        elif verb == "d":
            if not is_finite_number(value):
                raise NonNumericArgument(f"got {value!r}")
            out.append(str(value))
        else:
            self.check_dialect(verb)
            out.append(self.placeholder(verb, value))

    def check_dialect(self, verb: str) -> None:
        if self.dialect is None:
            self.dialect = verb  # type: ignore[assignment]
        elif self.dialect != verb:
            raise MixedPlaceholders(f"{self.dialect!r} and {verb!r}")

    def placeholder(self, verb: str, value: Any) -> str:
        self.args.append(value)
        if verb == "?":
            return "?"
        self.counter += 1
        if verb == "$":
            return f"${self.counter}"
        return f"@p{self.counter}"


class DebugRenderer(Renderer):
    """Inlines every value as literal text; nothing is bound."""

    def write_value(self, out: list[str], verb: str, value: Any) -> None:
        out.append(debug_literal(value))
