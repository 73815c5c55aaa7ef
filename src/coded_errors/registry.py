"""Registry mapping error codes to their message rules and base kinds.

Codes are declared once during a startup phase (see coded_errors.codes),
after which the registry is frozen and only read by the resolver.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from coded_errors.exceptions import DuplicateErrorCode, RegistryFrozen, UnknownErrorCode
from coded_errors.logging import get_logger
from coded_errors.rules import MessageRule, as_rule

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorDefinition:
    """One registered code: how to render it and which exception kind it extends."""

    code: str
    rule: MessageRule
    base: type[BaseException]


class MessageRegistry:
    def __init__(self) -> None:
        self._definitions: dict[str, ErrorDefinition] = {}
        self._frozen = False

    def register(
        self,
        code: str,
        rule: str | Callable[..., str] | MessageRule,
        base: type[BaseException],
    ) -> ErrorDefinition:
        """Register ``code`` exactly once.

        Raises:
            DuplicateErrorCode: ``code`` already has a rule.
            RegistryFrozen: the startup phase is over.
        """
        if self._frozen:
            raise RegistryFrozen(code)
        if code in self._definitions:
            raise DuplicateErrorCode(code)

        definition = ErrorDefinition(code=code, rule=as_rule(rule), base=base)
        self._definitions[code] = definition
        logger.debug(
            "error_code_registered",
            code=code,
            base=base.__name__,
            rule=type(definition.rule).__name__,
        )
        return definition

    def freeze(self) -> None:
        """End the registration phase; lookups keep working."""
        self._frozen = True
        logger.debug("message_registry_frozen", codes=len(self._definitions))

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def definitions(self) -> MappingProxyType[str, ErrorDefinition]:
        """Read-only view of every registered definition, keyed by code."""
        return MappingProxyType(self._definitions)

    def definition(self, code: str) -> ErrorDefinition:
        try:
            return self._definitions[code]
        except KeyError:
            raise UnknownErrorCode(code) from None

    def lookup(self, code: str) -> MessageRule:
        """Return the message rule for ``code``; unknown codes are a contract violation."""
        return self.definition(code).rule

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


# Process-wide registry populated by coded_errors.codes
messages = MessageRegistry()
