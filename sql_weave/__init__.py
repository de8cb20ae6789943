from .base import Builder, OnelineBuilder, sql
from .errors import (
    BuilderError,
    IncorrectVerb,
    LonelyModifier,
    MixedPlaceholders,
    NonCollectionArgument,
    NonNumericArgument,
    NonSliceArgument,
    TooFewArguments,
    TooManyArguments,
    UnsupportedVerb,
)
from .render import DebugRenderer, Renderer
from .types import Columns, Dialect, Fragment

__all__ = [
    "Builder",
    "BuilderError",
    "Columns",
    "DebugRenderer",
    "Dialect",
    "Fragment",
    "IncorrectVerb",
    "LonelyModifier",
    "MixedPlaceholders",
    "NonCollectionArgument",
    "NonNumericArgument",
    "NonSliceArgument",
    "OnelineBuilder",
    "Renderer",
    "TooFewArguments",
    "TooManyArguments",
    "UnsupportedVerb",
    "sql",
]
