from typing import Optional
from pydantic import BaseModel


class ProcessResult(BaseModel):
    """Result of a process execution."""

    returncode: int
    stdout: Optional[bytes] = None  # None when output was disabled
    stderr: Optional[bytes] = None

    def is_successful(self) -> bool:
        return self.returncode == 0
