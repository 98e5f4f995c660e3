from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Literal, Any, Dict, Tuple

from colorama import Fore, Style, just_fix_windows_console

# leaves sys.stdout/sys.stderr alone everywhere except legacy Windows consoles
just_fix_windows_console()

Level = Literal["DEBUG","INFO","WARN","ERROR"]

_SEVERITY: Dict[str, Tuple[int, str]] = {
    "DEBUG": (10, Fore.BLUE),
    "INFO": (20, Fore.GREEN),
    "WARN": (30, Fore.YELLOW),
    "ERROR": (40, Fore.RED),
}
LEVELS = tuple(_SEVERITY)

def format_record(level: str, msg: str, extra: Dict[str, Any]) -> str:
    stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
    fields = "".join(f" {k}={v}" for k, v in extra.items())
    return f"{stamp} [{level}] {msg}{fields}"

class Logger:
    """Diagnostics for the package itself, on stderr.

    Colour is on until :meth:`behold.config.BeholdConfig.apply` says otherwise.
    """

    def __init__(self, level: Level = "WARN", color: bool = True):
        self.threshold = _SEVERITY[level][0]
        self.color = color

    def set_level(self, level: Level):
        self.threshold = _SEVERITY[level][0]

    def enabled_for(self, level: Level) -> bool:
        return _SEVERITY[level][0] >= self.threshold

    def _emit(self, level: Level, msg: str, **extra: Any):
        if not self.enabled_for(level):
            return
        line = format_record(level, msg, extra)
        if self.color:
            line = f"{_SEVERITY[level][1]}{line}{Style.RESET_ALL}"
        sys.stderr.write(line + "\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger("WARN")
