"""Module defining custom exceptions for the brewavail application."""

from __future__ import annotations

from typing import Any, Self

# Exit Codes
EXIT_SUCCESS = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_REGISTRY_ERROR = 3
EXIT_MALFORMED_PACKAGE = 4


class BrewError(Exception):
    """Base exception class with context propagation.

    All exceptions in brewavail inherit from this class. Context is a
    dictionary that accumulates relevant information as the exception
    propagates up the call stack.

    Example:
        raise BrewError("An error occurred", context={"kind": "cask"})

        # Or with context propagation
        try:
            ...
        except BrewError as e:
            raise e.with_context(operation="gather")
    """
    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **new_context: Any) -> Self:
        """Returns the exception with updated context.

        Args:
            **new_context: Additional context to add to the exception.

        Returns:
            The same instance with merged context.
        """
        self.context.update(new_context)
        return self

    def __str__(self) -> str:
        """String representation of the exception including context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class SystemError(BrewError):
    """Errors due to the environment rather than the invocation.

    Nothing in brewavail is retried: a SystemError aborts the run before
    anything is written to stdout.
    """
    pass


## Specific Exceptions ##

class RegistryAccessError(SystemError):
    """Enumerating formulae or casks failed at the registry boundary."""

    def __init__(
        self,
        message: str | None = None,
        kind: str | None = None,
        error: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise RegistryAccessError with detailed context.

        Args:
            message: Optional custom error message.
            kind: The package kind being enumerated.
            error: The underlying error text.
            context: Additional context information.
        """
        ctx = context or {}
        if kind:
            ctx["kind"] = kind
        if error:
            ctx["error"] = error

        if message is None:
            kind_str = f" {kind}" if kind else ""
            message = f"Could not enumerate{kind_str} registry"

        super().__init__(message, context=ctx)


class BrewCommandError(RegistryAccessError):
    """Brew command returned a non-zero exit code or unparseable output.

    Typically indicates:
        - Corrupted local Homebrew installation
        - Broken or untrusted tap
        - Incompatible brew version
    """
    def __init__(
        self,
        message: str | None = None,
        command: str | None = None,
        returncode: int | None = None,
        error: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise BrewCommandError with detailed context.

        Args:
            message: Optional custom error message.
            command: The brew command that was executed.
            returncode: The exit code returned by the command.
            error: The error output from the command.
            context: Additional context information.
        """
        ctx = context or {}
        if command:
            ctx["command"] = command
        if returncode is not None:
            ctx["returncode"] = returncode

        if message is None:
            message = f"Brew command failed with exit code {returncode or 'unknown'}"

        super().__init__(message, error=error, context=ctx)


class BrewTimeoutError(RegistryAccessError):
    """Brew command timed out.

    Typically indicates:
        - Very large taps being evaluated
        - System resource constraints
    """
    def __init__(
        self,
        message: str | None = None,
        command: str | None = None,
        timeout: int | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise BrewTimeoutError with detailed context.

        Args:
            message: Optional custom error message.
            command: The brew command that was executed.
            timeout: The timeout threshold in seconds.
            context: Additional context information.
        """
        ctx = context or {}
        if command:
            ctx["command"] = command
        if timeout is not None:
            ctx["timeout"] = timeout

        if message is None:
            message = f"Brew command timed out after {timeout or 'unknown'}s"

        super().__init__(message, context=ctx)


class BrewNotFoundError(RegistryAccessError):
    """The brew executable could not be started."""

    def __init__(
        self,
        message: str | None = None,
        command: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command

        if message is None:
            message = f"Could not run '{command or 'brew'}'"

        super().__init__(message, context=ctx)


class MalformedPackageError(SystemError):
    """A registry record has no usable identifier.

    The whole run aborts; no partial listing is ever printed.
    """
    def __init__(
        self,
        message: str | None = None,
        kind: str | None = None,
        identifier: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise MalformedPackageError with detailed context.

        Args:
            message: Optional custom error message.
            kind: The kind of package (formula or cask).
            identifier: Best-effort identifier of the offending record.
            context: Additional context information.
        """
        ctx = context or {}
        if kind:
            ctx["kind"] = kind
        ctx["identifier"] = identifier or "unknown"

        if message is None:
            kind_str = f" {kind}" if kind else ""
            message = f"Malformed{kind_str} record '{ctx['identifier']}' has no name"

        super().__init__(message, context=ctx)


# CLI Error Message Templates

ERROR_TEMPLATES = {
    MalformedPackageError: (
        "❌ Malformed {kind}: {identifier}\n"
        "   The registry returned a package without a name - try 'brew doctor'"
    ),
    BrewTimeoutError: (
        "⚠️ Command timed out after {timeout}s: {command}\n"
        "   Raise BREWAVAIL_TIMEOUT if your taps are large"
    ),
    BrewNotFoundError: (
        "⚠️ Could not run: {command}\n"
        "   Install Homebrew or point BREWAVAIL_BREW at the brew executable"
    ),
    BrewCommandError: (
        "⚠️ Brew command failed: {command}\n"
        "   Exit Code: {returncode}\n"
        "   Error: {error}"
    ),
    RegistryAccessError: (
        "⚠️ Registry error: {message}\n"
        "   Error: {error}"
    ),
    SystemError: (
        "⚠️ System error: {message}\n"
        "   Please check your system configuration and try again"
    ),
    BrewError: (
        "❌ {message}"
    ),
}


def format_error_message(error: BrewError) -> str:
    """Formats an error message for CLI display based on the error type.

    Args:
        error: The BrewError instance to format.

    Returns:
        A formatted string message for CLI display.
    """
    template = next(
        (ERROR_TEMPLATES[cls] for cls in type(error).__mro__ if cls in ERROR_TEMPLATES),
        ERROR_TEMPLATES[BrewError],
    )
    try:
        return template.format(message=error.message, **error.context)
    except KeyError:
        return f"❌ {error.message}"


def exit_code_for(error: BaseException) -> int:
    """Map an exception to the process exit code.

    Args:
        error: The exception that aborted the run.

    Returns:
        An integer exit code.
    """
    if isinstance(error, MalformedPackageError):
        return EXIT_MALFORMED_PACKAGE
    if isinstance(error, RegistryAccessError):
        return EXIT_REGISTRY_ERROR
    return EXIT_UNEXPECTED_ERROR
