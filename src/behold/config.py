from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
from behold.core.errors import ConfigError
from behold.core.logging import logger, LEVELS

ENV_LOG_LEVEL = "BEHOLD_LOG_LEVEL"
ENV_COLOR_DISABLED = "BEHOLD_COLOR_DISABLED"
ENV_CONTEXT = "BEHOLD_CONTEXT"

_TRUE = {"1", "true", "on", "yes"}
_FALSE = {"0", "false", "off", "no"}

def parse_context_spec(raw: str) -> Dict[str, bool]:
    """Parse ``"net,db=off,cache=1"`` into context switches.

    Bare keys mean ``True``. Raises :class:`ConfigError` on an empty key or an
    unrecognised value.
    """
    out: Dict[str, bool] = {}
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, sep, value = chunk.partition("=")
        key = key.strip()
        if not key:
            raise ConfigError(ENV_CONTEXT, f"missing key in '{chunk}'")
        if not sep:
            out[key] = True
            continue
        value = value.strip().lower()
        if value in _TRUE:
            out[key] = True
        elif value in _FALSE:
            out[key] = False
        else:
            raise ConfigError(ENV_CONTEXT, f"'{value}' is not a boolean for key '{key}'")
    return out

@dataclass
class BeholdConfig:
    log_level: str = "WARN"
    color: bool = True
    context: Dict[str, bool] = field(default_factory=dict)

    def normalize(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LEVELS:
            self.log_level = "WARN"

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "BeholdConfig":
        env = os.environ if environ is None else environ
        data = cls(
            log_level=env.get(ENV_LOG_LEVEL, "WARN"),
            color=env.get(ENV_COLOR_DISABLED) != "1",
        )
        data.normalize()
        raw = env.get(ENV_CONTEXT)
        if raw:
            try:
                data.context = parse_context_spec(raw)
            except ConfigError as e:
                logger.warn("Failed to parse context seed, ignoring it", error=str(e))
        return data

    def apply(self):
        logger.set_level(self.log_level)  # dynamic adjust
        logger.color = self.color
