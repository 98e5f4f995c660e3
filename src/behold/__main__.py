"""Entry point for ``python -m behold``: the developer console."""

from behold.cli import run

if __name__ == "__main__":
    run()
