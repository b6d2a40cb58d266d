import math
import os
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from procspec.config import get_default_timeout
from procspec.modules.log.simple_logger import get_logger
from procspec.modules.process.exceptions import ConfigurationError, InvalidArgumentError
from procspec.modules.process.models.command_spec import CommandSpec
from procspec.modules.process.process_utils import (
    CommandArg,
    build_command_line,
    normalize_argument,
    normalize_arguments,
    validate_input,
)


class CommandBuilder:
    """
    Accumulates the configuration of a single command and produces a CommandSpec.

    The prefix (binary path plus fixed flags) survives `set_arguments`, so one
    builder can be reused for several invocations of the same tool. Every
    setter returns the builder for chaining.

    Example:
        spec = (
            CommandBuilder.create(["hello world"])
            .set_prefix("/bin/echo")
            .set_environment_variable("LANG", "C")
            .set_timeout_seconds(5)
            .build()
        )
        spec.to_subprocess()  # ['/bin/echo', 'hello world']
    """

    def __init__(self, arguments: Optional[Sequence[CommandArg]] = None, logger=None):
        self._prefix: List[str] = []
        self._arguments: List[str] = normalize_arguments(arguments or [])
        self._cwd: Optional[str] = None
        self._env: Dict[str, Optional[str]] = {}
        self._input: Any = None
        self._timeout: Optional[float] = None
        self._options: Dict[str, Any] = {}
        self._inherit_env = True
        self._output_disabled = False
        self.logger = logger or get_logger(self.__class__.__name__)
        try:
            self.set_timeout_seconds(get_default_timeout())
        except InvalidArgumentError as e:
            raise InvalidArgumentError(f"Invalid PROCSPEC_DEFAULT_TIMEOUT: {e}") from e

    @classmethod
    def create(cls, arguments: Optional[Sequence[CommandArg]] = None) -> "CommandBuilder":
        """Create a builder seeded with the given unescaped arguments."""
        return cls(arguments)

    def add_argument(self, argument: CommandArg) -> "CommandBuilder":
        """Append one unescaped argument."""
        self._arguments.append(normalize_argument(argument))
        return self

    def set_prefix(self, prefix: Union[CommandArg, Sequence[CommandArg]]) -> "CommandBuilder":
        """
        Replace the prefix with one entry or a list of entries.

        The prefix is prepended to the arguments at build time and is not
        cleared by `set_arguments`.
        """
        if isinstance(prefix, (list, tuple)):
            self._prefix = normalize_arguments(prefix)
        else:
            self._prefix = [normalize_argument(prefix)]
        return self

    def set_arguments(self, arguments: Sequence[CommandArg]) -> "CommandBuilder":
        """Replace all arguments. Arguments must not be escaped; the prefix is kept."""
        self._arguments = normalize_arguments(arguments)
        return self

    def set_working_directory(self, cwd: Optional[Union[str, "os.PathLike[str]"]]) -> "CommandBuilder":
        self._cwd = None if cwd is None else os.fspath(cwd)
        return self

    def inherit_environment_variables(self, inherit: bool = True) -> "CommandBuilder":
        self._inherit_env = bool(inherit)
        return self

    def set_environment_variable(self, name: str, value: Optional[str]) -> "CommandBuilder":
        """
        Set a single environment variable.

        Setting a variable overrides its previous value. Use None to keep the
        variable out of the process environment, even when it is inherited.
        """
        self._env[name] = _check_env_value(name, value)
        return self

    def add_environment_variables(self, variables: Mapping[str, Optional[str]]) -> "CommandBuilder":
        """Merge a set of variables; existing names are overridden by the new values."""
        for name, value in variables.items():
            self._env[name] = _check_env_value(name, value)
        return self

    def set_input(self, value: Any) -> "CommandBuilder":
        """
        Set the payload fed to the process's standard input.

        Raises:
            InvalidInputError: If the value has no byte representation
        """
        self._input = validate_input(value)
        return self

    def set_timeout_seconds(self, timeout: Optional[float]) -> "CommandBuilder":
        """
        Set the process timeout. None disables it.

        Raises:
            InvalidArgumentError: If the timeout is negative or not a number
        """
        if timeout is None:
            self._timeout = None
            return self

        try:
            seconds = float(timeout)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"The timeout value must be a number, got {timeout!r}") from None

        if math.isnan(seconds) or seconds < 0:
            raise InvalidArgumentError("The timeout value must be a valid positive integer or float number.")

        self._timeout = None if math.isinf(seconds) else seconds
        return self

    def set_option(self, name: str, value: Any) -> "CommandBuilder":
        """Add an option handed to the executor untouched."""
        self._options[name] = value
        return self

    def disable_output(self) -> "CommandBuilder":
        """Ask the executor not to capture stdout and stderr."""
        self._output_disabled = True
        return self

    def enable_output(self) -> "CommandBuilder":
        self._output_disabled = False
        return self

    def build(self) -> CommandSpec:
        """
        Create the CommandSpec for the current configuration.

        The builder is left untouched and can be reused.

        Raises:
            ConfigurationError: If neither prefix nor arguments were provided
        """
        if not self._prefix and not self._arguments:
            raise ConfigurationError("no command configured: add_argument() or set_prefix() before build()")

        spec = CommandSpec(
            arguments=[*self._prefix, *self._arguments],
            cwd=self._cwd,
            env=dict(self._env),
            input=self._input,
            timeout=self._timeout,
            options=dict(self._options),
            inherit_env=self._inherit_env,
            output_disabled=self._output_disabled,
        )
        self.logger.debug(f"Built command: {spec.command_line}")
        return spec

    def __repr__(self) -> str:
        return f"CommandBuilder({build_command_line(self._prefix + self._arguments)})"


def _check_env_value(name, value) -> Optional[str]:
    if not isinstance(name, str) or not name or "=" in name:
        raise InvalidArgumentError(f"Invalid environment variable name: {name!r}")
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentError(f"Environment variable {name} must be a string or None, got {type(value).__name__}")
    return value
