from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentPort(ABC):
    """Read-only source of configuration variables."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the raw value for `name`, or None when it is not set."""
        pass
