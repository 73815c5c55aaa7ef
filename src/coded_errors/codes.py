"""Error codes raised while resolving ES modules and package configs.

Importing this module declares every code into the process-wide registry and
then freezes it. Each name is an exception class:

    from coded_errors.codes import ERR_MODULE_NOT_FOUND

    raise ERR_MODULE_NOT_FOUND("left-pad", "/app/index.js")
"""

from urllib.parse import ParseResult, SplitResult, urlsplit

from coded_errors.config import settings
from coded_errors.exceptions import ErrorContractViolation
from coded_errors.factory import CodedError, define_error
from coded_errors.formatting import inspect_value, to_json, truncate
from coded_errors.registry import messages


def _imported_from(base: str | None) -> str:
    return f" imported from {base}" if base else ""


def _invalid_module_specifier(
    self: CodedError, request: str, reason: str, base: str | None = None
) -> str:
    return f'Invalid module "{request}" {reason}{_imported_from(base)}'


ERR_INVALID_MODULE_SPECIFIER = define_error(
    "ERR_INVALID_MODULE_SPECIFIER",
    _invalid_module_specifier,
    TypeError,
)


def _invalid_package_config(
    self: CodedError, path: str, base: str | None, message: str | None
) -> str:
    while_importing = f" while importing {base}" if base else ""
    detail = f". {message}" if message else ""
    return f"Invalid package config {path}{while_importing}{detail}"


ERR_INVALID_PACKAGE_CONFIG = define_error(
    "ERR_INVALID_PACKAGE_CONFIG",
    _invalid_package_config,
    Exception,
)


def _invalid_package_target(
    self: CodedError,
    pkg_path: str,
    key: str,
    target: object,
    is_import: bool = False,
    base: str | None = None,
) -> str:
    rel_error = (
        isinstance(target, str)
        and not is_import
        and len(target) > 0
        and not target.startswith("./")
    )
    suffix = _imported_from(base) + ('; targets must start with "./"' if rel_error else "")

    if key == ".":
        if is_import:
            raise ErrorContractViolation(
                "Code: ERR_INVALID_PACKAGE_TARGET; the main target cannot be an import"
            )
        return (
            f"Invalid \"exports\" main target {to_json(target)} defined "
            f"in the package config {pkg_path}package.json{suffix}"
        )

    field = "imports" if is_import else "exports"
    return (
        f'Invalid "{field}" target {to_json(target)} defined for '
        f"'{key}' in the package config {pkg_path}package.json{suffix}"
    )


ERR_INVALID_PACKAGE_TARGET = define_error(
    "ERR_INVALID_PACKAGE_TARGET",
    _invalid_package_target,
    Exception,
)


def _module_not_found(self: CodedError, path: str, base: str, kind: str = "package") -> str:
    return f"Cannot find {kind} '{path}' imported from {base}"


ERR_MODULE_NOT_FOUND = define_error(
    "ERR_MODULE_NOT_FOUND",
    _module_not_found,
    Exception,
)


def _package_import_not_defined(
    self: CodedError, specifier: str, package_path: str | None, base: str
) -> str:
    in_package = f" in package {package_path}package.json" if package_path else ""
    return f'Package import specifier "{specifier}" is not defined{in_package} imported from {base}'


ERR_PACKAGE_IMPORT_NOT_DEFINED = define_error(
    "ERR_PACKAGE_IMPORT_NOT_DEFINED",
    _package_import_not_defined,
    TypeError,
)


def _package_path_not_exported(
    self: CodedError, pkg_path: str, subpath: str, base: str | None = None
) -> str:
    if subpath == ".":
        return f'No "exports" main defined in {pkg_path}package.json{_imported_from(base)}'
    return (
        f"Package subpath '{subpath}' is not defined by \"exports\" in "
        f"{pkg_path}package.json{_imported_from(base)}"
    )


ERR_PACKAGE_PATH_NOT_EXPORTED = define_error(
    "ERR_PACKAGE_PATH_NOT_EXPORTED",
    _package_path_not_exported,
    Exception,
)

ERR_UNSUPPORTED_DIR_IMPORT = define_error(
    "ERR_UNSUPPORTED_DIR_IMPORT",
    "Directory import '%s' is not supported resolving ES modules imported from %s",
    Exception,
)

ERR_UNKNOWN_FILE_EXTENSION = define_error(
    "ERR_UNKNOWN_FILE_EXTENSION",
    'Unknown file extension "%s" for %s',
    TypeError,
)


def _invalid_arg_value(
    self: CodedError, name: str, value: object, reason: str = "is invalid"
) -> str:
    inspected = truncate(inspect_value(value))
    kind = "property" if "." in name else "argument"
    return f"The {kind} '{name}' {reason}. Received {inspected}"


ERR_INVALID_ARG_VALUE = define_error(
    "ERR_INVALID_ARG_VALUE",
    _invalid_arg_value,
    TypeError,
)


def _unsupported_esm_url_scheme(self: CodedError, url: str | SplitResult | ParseResult) -> str:
    parsed = urlsplit(url) if isinstance(url, str) else url
    protocol = f"{parsed.scheme}:"

    message = "Only file and data URLs are supported by the default ESM loader"
    # A one-letter scheme is a drive letter, e.g. "c:"
    if settings.is_windows and len(protocol) == 2:
        message += ". On Windows, absolute paths must be valid file:// URLs"
    return f"{message}. Received protocol '{protocol}'"


ERR_UNSUPPORTED_ESM_URL_SCHEME = define_error(
    "ERR_UNSUPPORTED_ESM_URL_SCHEME",
    _unsupported_esm_url_scheme,
    Exception,
)

messages.freeze()
