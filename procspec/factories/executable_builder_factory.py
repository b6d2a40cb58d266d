"""
Executable Builder Factory

Concrete BuilderFactory that validates the bound binary on the local
filesystem, plus a helper that binds it from the environment.
"""
import os
import shutil
from typing import Optional

from procspec.config import get_default_binary
from procspec.factories.builder_factory import BuilderFactory
from procspec.modules.log.simple_logger import get_logger
from procspec.modules.process.command_builder import CommandBuilder
from procspec.modules.process.exceptions import InvalidArgumentError


class ExecutableBuilderFactory(BuilderFactory):
    """
    Factory for CommandBuilders bound to an executable on this host.

    Bare command names are looked up on PATH (or on `search_path` when given);
    anything containing a path separator must point to an executable file.
    The bound binary is always stored as an absolute path.
    """

    def __init__(self, binary: Optional[str] = None, search_path: Optional[str] = None, logger=None):
        self.search_path = search_path
        self.logger = logger or get_logger(self.__class__.__name__)
        self._binary: Optional[str] = None
        if binary is not None:
            self.use_binary(binary)

    def create(self) -> CommandBuilder:
        if self._binary is None:
            raise InvalidArgumentError("No binary configured, call use_binary() first")
        return CommandBuilder.create().set_prefix(self._binary)

    def get_binary(self) -> Optional[str]:
        return self._binary

    def use_binary(self, binary) -> "ExecutableBuilderFactory":
        self._binary = self._resolve_executable(binary)
        self.logger.info(f"Using binary: {self._binary}")
        return self

    def _resolve_executable(self, binary) -> str:
        """
        Resolve a path or bare command name to an absolute executable path.

        Raises:
            InvalidArgumentError: If nothing executable is found
        """
        if isinstance(binary, os.PathLike):
            binary = os.fspath(binary)
        if not isinstance(binary, str) or not binary.strip():
            raise InvalidArgumentError(f"Binary must be a non-empty path, got {binary!r}")

        if os.sep in binary or (os.altsep and os.altsep in binary):
            candidate = os.path.abspath(binary)
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
            self.logger.error(f"Binary is not an executable file: {candidate}")
            raise InvalidArgumentError(f"{binary} is not executable")

        resolved = shutil.which(binary, path=self.search_path)
        if resolved is None:
            self.logger.error(f"Executable '{binary}' was not found on PATH")
            raise InvalidArgumentError(f"{binary} is not executable")
        return os.path.abspath(resolved)


def create_builder_factory(binary: Optional[str] = None) -> ExecutableBuilderFactory:
    """
    Factory function to create an ExecutableBuilderFactory.

    Falls back to the `PROCSPEC_BINARY` environment variable when no binary
    is passed, and leaves the factory unbound when neither is set.

    Returns:
        ExecutableBuilderFactory: The configured factory
    """
    return ExecutableBuilderFactory(binary or get_default_binary())
