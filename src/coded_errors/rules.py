"""Message rules: the registered recipe for rendering a code's message.

A rule is either a fixed template with positional placeholders or a function
of the in-progress error and the caller's arguments. Both expose the same
arity bounds and a render() method, so resolution never inspects raw values.
"""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from coded_errors.formatting import format_template, placeholder_kinds


@dataclass(frozen=True)
class StringTemplate:
    """Fixed text; one argument per placeholder, no more, no less."""

    text: str
    placeholders: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "StringTemplate":
        return cls(text=text, placeholders=placeholder_kinds(text))

    @property
    def min_arity(self) -> int:
        return len(self.placeholders)

    @property
    def max_arity(self) -> int | None:
        return len(self.placeholders)

    def accepts(self, provided: int) -> bool:
        return provided == len(self.placeholders)

    def render(self, error: BaseException, args: Sequence[object]) -> str:
        if not self.placeholders:
            return self.text
        return format_template(self.text, args)


@dataclass(frozen=True)
class MessageFunction:
    """A function called as ``fn(error, *args)``.

    Trailing parameters with defaults are optional and arguments beyond
    ``max_arity`` are dropped; ``max_arity`` is None when the function takes
    ``*args``.
    """

    fn: Callable[..., str]
    min_arity: int
    max_arity: int | None

    @classmethod
    def from_callable(cls, fn: Callable[..., str]) -> "MessageFunction":
        positional = []
        variadic = False
        for parameter in inspect.signature(fn).parameters.values():
            if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
                variadic = True
            elif parameter.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                positional.append(parameter)

        if not positional:
            raise TypeError(
                f"message function {fn.__qualname__} must accept the error as its first parameter"
            )

        # The first parameter receives the error, not a caller argument
        arguments = positional[1:]
        required = sum(1 for p in arguments if p.default is inspect.Parameter.empty)
        return cls(
            fn=fn,
            min_arity=required,
            max_arity=None if variadic else len(arguments),
        )

    def accepts(self, provided: int) -> bool:
        return provided >= self.min_arity

    def render(self, error: BaseException, args: Sequence[object]) -> str:
        if self.max_arity is not None:
            args = args[: self.max_arity]
        return self.fn(error, *args)


MessageRule = StringTemplate | MessageFunction


def as_rule(value: "str | Callable[..., str] | MessageRule") -> MessageRule:
    """Tag a raw template or function as a MessageRule; rules pass through."""
    if isinstance(value, StringTemplate | MessageFunction):
        return value
    if isinstance(value, str):
        return StringTemplate.parse(value)
    if callable(value):
        return MessageFunction.from_callable(value)
    raise TypeError(f"message rule must be a str or a callable, got {type(value).__name__}")
