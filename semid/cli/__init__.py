"""Command line interface for semid."""

from .app import app


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
