from __future__ import annotations

from typing import Optional


class AskGptError(Exception):
    """Base class for every fatal failure of an askgpt run."""


class ConfigError(AskGptError):
    pass


class InputError(AskGptError):
    pass


class CompletionError(AskGptError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreError(AskGptError):
    pass
