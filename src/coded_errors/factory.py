"""Error factory: one exception class per registered code.

    ERR_MODULE_NOT_FOUND = define_error(
        "ERR_MODULE_NOT_FOUND",
        lambda self, path, base: f"Cannot find package '{path}' imported from {base}",
        Exception,
    )

    raise ERR_MODULE_NOT_FOUND("left-pad", "/app/index.js")

The resulting error is an instance of both CodedError and the declared base
kind, carries the resolved message, a permanent ``code``, and a trace that
starts at the raise site rather than inside this module.
"""

from collections.abc import Callable
from traceback import StackSummary

from coded_errors import trace
from coded_errors.registry import MessageRegistry, messages
from coded_errors.resolver import get_message
from coded_errors.rules import MessageRule
from coded_errors.trace import format_stack, hide_stack_frames

SYSTEM_ERROR_NAME = "SystemError"

_PERMANENT_ATTRIBUTES = frozenset({"code", "frames", "stack"})


class CodedError(Exception):
    """Common base of every class returned by define_error().

    Subclasses set ``code``, ``base_name`` and ``name`` as class attributes
    and are combined with the declared base kind, e.g.
    ``class ERR_UNKNOWN_FILE_EXTENSION(CodedError, TypeError)``.
    """

    code: str
    base_name: str
    name: str
    frames: StackSummary
    stack: str
    registry: MessageRegistry

    @hide_stack_frames
    def __init__(self, *args: object) -> None:
        # The base kind contributes no frames of its own
        with trace.stack_trace_limit.override(0):
            super().__init__()
        code = type(self).code
        self.message = get_message(code, args, self, type(self).registry)
        add_code_to_name(self, self.base_name, code)
        self.code = code

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    @message.setter
    def message(self, value: str) -> None:
        # Kept in args so it stays out of vars(error)
        self.args = (value,)

    def to_string(self) -> str:
        return f"{self.name} [{self.code}]: {self.message}"

    def __str__(self) -> str:
        return self.to_string()

    def __reduce__(self) -> tuple[object, ...]:
        # Restored without __init__; the message is already resolved
        return (_restore_error, (type(self), self.args, dict(self.__dict__)))

    def __setattr__(self, name: str, value: object) -> None:
        if name in _PERMANENT_ATTRIBUTES and name in self.__dict__:
            raise AttributeError(f"{name!r} of {self.code} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _PERMANENT_ATTRIBUTES:
            raise AttributeError(f"{name!r} of {self.code} is read-only")
        super().__delattr__(name)


def _restore_error(
    cls: type[CodedError], args: tuple[object, ...], state: dict[str, object]
) -> CodedError:
    error = cls.__new__(cls)
    error.args = args
    error.__dict__.update(state)
    return error


@hide_stack_frames
def add_code_to_name(error: CodedError, name: str, code: str) -> None:
    trace.capture_larger_stack_trace(error)
    # The code only appears in the name while the stack header is rendered
    error.name = f"{name} [{code}]"
    error.stack = format_stack(f"{error.name}: {error.message}", error.frames)
    if name == SYSTEM_ERROR_NAME:
        # Falls back to the class attribute
        del error.name
    else:
        error.name = ""


def make_error_with_code(
    base: type[BaseException],
    code: str,
    registry: MessageRegistry = messages,
) -> type[CodedError]:
    """Build the constructor class for ``code``; ``code`` must already be registered."""
    return type(
        code,
        (CodedError, base),
        {
            "code": code,
            "base_name": base.__name__,
            "name": base.__name__,
            "registry": registry,
            "__module__": CodedError.__module__,
        },
    )


def define_error(
    code: str,
    rule: str | Callable[..., str] | MessageRule,
    base: type[BaseException],
    *,
    registry: MessageRegistry = messages,
) -> type[CodedError]:
    """Register ``rule`` for ``code`` and return the constructor for it.

    Args:
        code: Unique symbol, e.g. "ERR_MODULE_NOT_FOUND".
        rule: A template with positional placeholders, or a function called
            as ``rule(error, *args)``.
        base: Exception kind the errors are instances of.
        registry: Registry to declare into; the process-wide one by default.
    """
    registry.register(code, rule, base)
    return make_error_with_code(base, code, registry)
