from __future__ import annotations

class BeholdError(Exception):
    """Base for internal errors."""

class ConfigError(BeholdError):
    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid value for '{name}': {detail}")
        self.name = name
        self.detail = detail
