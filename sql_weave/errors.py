from typing import Optional


class BuilderError(ValueError):
    summary = "query build failed"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f"{self.summary}: {detail}")
        else:
            super().__init__(self.summary)


class TooFewArguments(BuilderError):
    summary = "too few arguments"


class TooManyArguments(BuilderError):
    summary = "too many arguments"


class UnsupportedVerb(BuilderError):
    summary = "unsupported verb"


class IncorrectVerb(BuilderError):
    summary = "incorrect verb"


class LonelyModifier(BuilderError):
    summary = "lonely modifier"


class MixedPlaceholders(BuilderError):
    summary = "mixed placeholders must not be used in a single query"


class NonCollectionArgument(BuilderError, TypeError):
    summary = "non-sequence arguments must not be used with sequence modifiers"


class NonNumericArgument(BuilderError, TypeError):
    summary = "non-numeric argument"


NonSliceArgument = NonCollectionArgument
