"""
Process Executor Interface

This module defines the abstract base class for the collaborators that run a
CommandSpec. Optional behaviours are declared as capabilities so callers never
need to probe an executor for methods at runtime.
"""
from abc import ABC, abstractmethod

from procspec.modules.log.simple_logger import get_logger
from procspec.modules.process.models.command_spec import CommandSpec
from procspec.modules.process.models.process_result import ProcessResult


class ProcessExecutor(ABC):
    """
    Abstract base class for running a built CommandSpec.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger(self.__class__.__name__)

    @property
    def supports_environment_inheritance(self) -> bool:
        """Whether the executor can merge the spec's overrides into the inherited environment."""
        return False

    @property
    def supports_output_disable(self) -> bool:
        """Whether the executor can skip capturing stdout and stderr."""
        return False

    def execute(self, spec: CommandSpec) -> ProcessResult:
        """
        Run the command described by the spec.

        Requested behaviours the executor does not support are logged and
        skipped; the command still runs.

        Args:
            spec: The command to run

        Returns:
            ProcessResult: Exit code and captured output
        """
        if spec.inherit_env and not self.supports_environment_inheritance:
            self.logger.warning(
                f"{self.__class__.__name__} cannot inherit environment variables, running with overrides only"
            )
        if spec.output_disabled and not self.supports_output_disable:
            self.logger.warning(f"{self.__class__.__name__} cannot disable output, output will be captured")
        return self._run(spec)

    @abstractmethod
    def _run(self, spec: CommandSpec) -> ProcessResult:
        """
        Spawn the process and wait for it.

        Args:
            spec: The command to run

        Returns:
            ProcessResult: Exit code and captured output
        """
        pass
