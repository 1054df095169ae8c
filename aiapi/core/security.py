"""
Credential stores.

The request builders never look up a key themselves; callers pass the secret in.
These stores are the collaborators that produce that string. Values are read on
every call and are never cached, validated or written back.
"""

import os
from typing import Optional, Protocol

from .config import OPENAI_API_KEY_ENV, OPENAI_KEY_FILE


class CredentialStore(Protocol):
    def get_api_key(self) -> str:
        ...


class StaticCredentialStore:
    """Hands out a fixed value. Mostly useful for tests and scripts."""

    def __init__(self, api_key: Optional[str] = ""):
        self._api_key = api_key or ""

    def get_api_key(self) -> str:
        return self._api_key


class EnvCredentialStore:
    """
    Resolve the API key from the environment, falling back to a key file.

    Resolution order:
        1. Environment variable `env_var`.
        2. Stripped contents of `key_file` (if configured and present).
        3. Empty string. A missing key is not an error here; the remote API
           decides whether the credential is usable.
    """

    def __init__(self, env_var: str = OPENAI_API_KEY_ENV, key_file: Optional[str] = OPENAI_KEY_FILE):
        self.env_var = env_var
        self.key_file = key_file

    def get_api_key(self) -> str:
        env_value = os.getenv(self.env_var)
        if env_value:
            return env_value
        if not self.key_file or not os.path.exists(self.key_file):
            return ""
        with open(self.key_file, "r") as f:
            return f.read().strip()
