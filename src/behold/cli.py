from __future__ import annotations
from rich.console import Console
from rich.table import Table
from rich.box import ROUNDED
from behold.context import get_store, set_context, clear_context
from behold.instance import behold
from behold.core.logging import logger

HELP = """Commands:
  /set KEY [on|off]   set a context switch (default on)
  /clear KEY          forget a context switch
  /flags              list context switches
  /show KEY MESSAGE   show MESSAGE if KEY is on
  /tag TAG MESSAGE    show MESSAGE with TAG
  /help               this text
  quit                leave"""

_ON = {"on", "1", "true", "yes"}
_OFF = {"off", "0", "false", "no"}

def _print_flags(console: Console):
    values = get_store().snapshot()
    if not values:
        console.print("Flags: (none)")
        return
    table = Table(title="Context", box=ROUNDED)
    table.add_column("Key", style="cyan")
    table.add_column("Value", justify="center")
    for key in sorted(values):
        table.add_row(key, "on" if values[key] else "off")
    console.print(table)

def _handle(cmd: str, console: Console):
    name, _, rest = cmd.partition(" ")
    if name == "/set":
        parts = rest.split()
        if not parts or len(parts) > 2:
            print("Usage: /set KEY [on|off]")
            return
        value = parts[1].lower() if len(parts) == 2 else "on"
        if value not in _ON and value not in _OFF:
            print(f"Not a switch value: {value}")
            return
        set_context(parts[0], value in _ON)
        print("Context set")
    elif name == "/clear":
        parts = rest.split()
        if len(parts) != 1:
            print("Usage: /clear KEY")
            return
        clear_context(parts[0])
        print("Context cleared")
    elif cmd == "/flags":
        _print_flags(console)
    elif name in ("/show", "/tag"):
        # KEY/TAG is one word, the message keeps its inner spacing
        parts = rest.split(None, 1)
        if len(parts) < 2:
            print("Usage: /show KEY MESSAGE" if name == "/show" else "Usage: /tag TAG MESSAGE")
            return
        if name == "/show":
            behold().when_context(parts[0]).show(parts[1])
        else:
            behold().tag(parts[0]).show(parts[1])
    elif cmd == "/help":
        print(HELP)
    else:
        print("Unknown command")

def run():
    """Developer console for flipping context switches."""
    console = Console()
    logger.debug("ConsoleStarted")
    while True:
        try:
            cmd = input(":").strip()
        except EOFError:
            break
        if cmd in ("exit","quit","q"):
            break
        if not cmd:
            continue
        _handle(cmd, console)
