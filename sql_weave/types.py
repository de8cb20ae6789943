import dataclasses
from typing import Any, Literal

from typing_extensions import TypeAlias

Dialect: TypeAlias = Literal["$", "?", "@"]

PLACEHOLDER_VERBS = "$?@"
RAW_VERBS = "sd"
VALUE_VERBS = PLACEHOLDER_VERBS + RAW_VERBS


@dataclasses.dataclass(frozen=True)
class Fragment:
    __slots__ = ["format", "values"]
    format: str
    values: tuple[Any, ...]


class Columns(list[str]):
    """Column names, rendered as a comma-separated list by ``%s``."""

    def __str__(self) -> str:
        return ", ".join(self)

    def __getitem__(self, index):  # type: ignore[override]
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return Columns(result)
        return result

    def prefixed(self, prefix: str) -> str:
        return ", ".join(f"{prefix}{name}" for name in self)
