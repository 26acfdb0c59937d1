"""EnvironmentPort implementations.

All adapters are read-only: they never write back to the mapping or to
`os.environ`.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from blog_globals.core.exceptions import EnvironmentFileError
from blog_globals.core.interfaces.environment import EnvironmentPort


class MappingEnvironmentAdapter(EnvironmentPort):
    """Serve variables from an injected mapping."""

    def __init__(self, values: Mapping[str, Optional[str]]):
        self._values = values

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)


class OsEnvironmentAdapter(EnvironmentPort):
    """Serve variables from the live process environment."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class DotEnvEnvironmentAdapter(EnvironmentPort):
    """Layer a .env file under the process environment.

    The file is parsed once, at construction. A variable set in the process
    environment always wins over the file, even when it is empty.
    """

    def __init__(self, path: str | Path, process_env: EnvironmentPort | None = None):
        self.path = Path(path)
        if not self.path.is_file():
            raise EnvironmentFileError(str(self.path))
        # no ${VAR} expansion: file values reach the decoder as written
        try:
            self._file_values = dotenv_values(self.path, encoding="utf-8", interpolate=False)
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvironmentFileError(str(self.path), diagnostic=str(exc)) from exc
        self._process_env = process_env or OsEnvironmentAdapter()

    def get(self, name: str) -> Optional[str]:
        value = self._process_env.get(name)
        if value is not None:
            return value
        return self._file_values.get(name)
