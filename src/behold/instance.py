from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Optional
from behold import context

@dataclass(frozen=True)
class Behold:
    """One debug call site: configure with ``when``/``when_context``/``tag``, then ``show`` or ``call``.

    Builder methods return a new instance; the receiver is left untouched.
    """
    enabled: bool = True
    label: Optional[str] = None

    def when(self, flag: bool) -> "Behold":
        return replace(self, enabled=bool(flag))

    def when_context(self, key: str) -> "Behold":
        # read once now, later writes to the table do not affect this instance
        return replace(self, enabled=context.get_context(key))

    def tag(self, text: str) -> "Behold":
        return replace(self, label=text)

    def set_context(self, key: str, value: bool):
        """Set a switch in the *global* table. This instance is unchanged."""
        context.set_context(key, value)

    def show(self, message: str):
        if not self.enabled:
            return
        if self.label is None:
            print(f"Behold: {message}")
        else:
            # tagged lines drop the "Behold: " prefix
            print(f"{message}, {self.label}")

    def call(self, action: Callable[[], object]):
        if self.enabled:
            action()

def behold() -> Behold:
    return Behold()
