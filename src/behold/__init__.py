"""Contextual debug printing.

    from behold import behold, set_context

    set_context("net", True)
    behold().when_context("net").show("socket opened")   # Behold: socket opened
    behold().when_context("db").show("query")            # nothing, "db" never set
"""
from behold.context import ContextStore, get_store, set_context, get_context, clear_context
from behold.instance import Behold, behold

__all__ = [
    "Behold",
    "behold",
    "ContextStore",
    "get_store",
    "set_context",
    "get_context",
    "clear_context",
]
