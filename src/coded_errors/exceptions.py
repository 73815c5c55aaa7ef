"""Contract violations raised by the error machinery itself.

These signal defects in calling code (an unknown code, a rule invoked with
the wrong number of arguments, a second registration), not domain failures.
They subclass AssertionError so they read as failed assertions in any
top-level handler and are never mistaken for the coded errors they guard.
"""


class ErrorContractViolation(AssertionError):
    """Base class for all contract violations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownErrorCode(ErrorContractViolation):
    """Raised when a code was never registered."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Code: {code}; No message rule is registered for this code.")


class DuplicateErrorCode(ErrorContractViolation):
    """Raised when a code is registered a second time."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Code: {code}; A message rule is already registered for this code.")


class RegistryFrozen(ErrorContractViolation):
    """Raised when registering into a registry after its startup phase."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Code: {code}; The message registry no longer accepts registrations.")


class ArgumentCountMismatch(ErrorContractViolation):
    """Raised when the supplied arguments do not fit the rule's arity."""

    def __init__(self, code: str, provided: int, required: int) -> None:
        self.code = code
        self.provided = provided
        self.required = required
        super().__init__(
            f"Code: {code}; The provided arguments length ({provided}) does not "
            f"match the required ones ({required})."
        )
