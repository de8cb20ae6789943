from typing import TYPE_CHECKING, Any

from .render import Renderer

try:
    from sqlalchemy.sql import bindparam, text
    from sqlalchemy.sql.elements import BindParameter

    class SqlAlchemyRenderer(Renderer):
        def __init__(self) -> None:
            super().__init__()
            self.bindparams: list[BindParameter] = []

        def placeholder(self, verb: str, value: Any) -> str:
            self.args.append(value)
            self.counter += 1
            key = f"_arg_{self.counter}"
            if isinstance(value, BindParameter):
                self.bindparams.append(bindparam(key, value.value, value.type))
            else:
                self.bindparams.append(bindparam(key, value))
            return f"(:{key})"

    def sqlalchemy_text_from_builder(self: "Builder") -> Any:
        renderer = SqlAlchemyRenderer()
        query = self.render(renderer)
        return text(query).bindparams(*renderer.bindparams)

except ImportError:

    def sqlalchemy_text_from_builder(self: "Builder") -> Any:
        raise ImportError("No sqlalchemy installed")


if TYPE_CHECKING:
    from .base import Builder
