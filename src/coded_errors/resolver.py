"""Resolve a code and the caller's arguments into a message string."""

from collections.abc import Sequence

from coded_errors.exceptions import ArgumentCountMismatch
from coded_errors.registry import MessageRegistry, messages


def get_message(
    code: str,
    args: Sequence[object],
    error: BaseException,
    registry: MessageRegistry = messages,
) -> str:
    """Render the message for ``code``.

    ``error`` is the in-progress error; function rules receive it as their
    first argument. Templates need exactly one argument per placeholder;
    functions need at least their required parameters and ignore extras.
    Missing arguments are never padded.

    Raises:
        UnknownErrorCode: ``code`` is not registered.
        ArgumentCountMismatch: ``args`` does not fit the rule.
    """
    rule = registry.lookup(code)

    provided = len(args)
    if not rule.accepts(provided):
        raise ArgumentCountMismatch(code, provided, rule.min_arity)

    return rule.render(error, args)
