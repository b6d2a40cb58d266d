"""
Builder Factory Interface

A BuilderFactory hands out CommandBuilders pre-seeded with the path of one
external binary, so callers never deal with locating the tool themselves.
"""
from abc import ABC, abstractmethod
from typing import Optional

from procspec.modules.process.command_builder import CommandBuilder


class BuilderFactory(ABC):

    @abstractmethod
    def create(self) -> CommandBuilder:
        """
        Return a new CommandBuilder whose prefix is the bound binary.

        Raises:
            InvalidArgumentError: If no binary is bound
        """
        pass

    @abstractmethod
    def get_binary(self) -> Optional[str]:
        """Return the bound binary path, or None."""
        pass

    @abstractmethod
    def use_binary(self, binary: str) -> "BuilderFactory":
        """
        Bind the factory to another binary.

        Args:
            binary: Path or bare command name of the executable

        Returns:
            BuilderFactory: The factory itself

        Raises:
            InvalidArgumentError: If the binary is not an executable file
        """
        pass
