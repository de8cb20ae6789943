import logging
from collections.abc import Iterator
from typing import Any, Optional

from typing_extensions import LiteralString, Self

from .errors import BuilderError
from .render import DebugRenderer, Renderer
from .sqlalchemy import sqlalchemy_text_from_builder
from .types import Fragment

logger = logging.getLogger(__name__)


class Builder:
    """Accumulates format fragments and renders them into a query.

    Fragments are only recorded by :meth:`add`; all parsing happens in
    :meth:`build`, which may be called any number of times.
    """

    sep = "\n"

    def __init__(self, sep: Optional[str] = None) -> None:
        self.fragments: list[Fragment] = []
        if sep is not None:
            self.sep = sep

    def add(self, fmt: LiteralString, *values: Any) -> Self:
        self.fragments.append(Fragment(fmt, values))
        return self

    __call__ = add

    def render(self, renderer: Renderer) -> str:
        out: list[str] = []
        for i, fragment in enumerate(self.fragments):
            try:
                renderer.write_fragment(out, fragment.format, fragment.values)
            except BuilderError as e:
                logger.debug("fragment %d %r failed: %s", i, fragment.format, e)
                raise
            out.append(self.sep)
        if out:
            out.pop()
        return "".join(out)

    def build(self) -> tuple[str, list[Any]]:
        renderer = Renderer()
        query = self.render(renderer)
        logger.debug("built query with %d placeholders", len(renderer.args))
        return query, renderer.args

    def debug_build(self) -> str:
        return self.render(DebugRenderer())

    def sqlalchemy_text(self) -> Any:
        return sqlalchemy_text_from_builder(self)

    def __iter__(self) -> Iterator[Any]:
        query, args = self.build()
        return iter((query, *args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fragments={self.fragments!r})"


class OnelineBuilder(Builder):
    sep = " "


def sql(fmt: LiteralString, *values: Any) -> tuple[str, list[Any]]:
    return OnelineBuilder().add(fmt, *values).build()
