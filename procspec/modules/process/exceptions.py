"""
Errors raised while configuring, building and executing commands.
"""


class ProcessBuilderError(Exception):
    """Base class for every procspec error."""


class ConfigurationError(ProcessBuilderError, RuntimeError):
    """The builder holds no command to run."""


class InvalidArgumentError(ProcessBuilderError, ValueError):
    """A setter or factory received a value it cannot use."""


class InvalidInputError(InvalidArgumentError):
    """The process input has no byte representation."""


class ProcessExecutionError(ProcessBuilderError, RuntimeError):
    """The executor could not run the process."""


class ProcessTimeoutError(ProcessExecutionError):
    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout
