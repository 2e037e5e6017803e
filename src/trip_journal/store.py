"""Persistent storage for the bearer token between launches."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from trip_journal.models.auth import Token
from trip_journal.utils.errors import StoreError


class CredentialStore(Protocol):
    """Holds at most one token. Every method may raise ``StoreError``."""

    def save(self, token: Token) -> None: ...

    def get(self) -> Token | None: ...

    def delete(self) -> None: ...


class FileCredentialStore:
    """Stores the token as a JSON document readable only by the owner.

    The default location is ``~/.trip_journal/credentials.json``.
    """

    def __init__(self, path: str | Path) -> None:
        self._file = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._file

    def save(self, token: Token) -> None:
        """Write the token, replacing any previous one."""
        try:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as f:
                f.write(token.model_dump_json(indent=2))
        except OSError as e:
            raise StoreError(f"Could not save token to {self._file}: {e}") from e

    def get(self) -> Token | None:
        """Load the stored token, or None if nothing is stored."""
        if not self._file.exists():
            return None
        try:
            with open(self._file) as f:
                data = json.load(f)
            return Token.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise StoreError(f"Could not read token from {self._file}: {e}") from e

    def delete(self) -> None:
        """Remove the stored token. Deleting when nothing is stored is fine."""
        try:
            self._file.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"Could not delete token at {self._file}: {e}") from e
