"""Flask front-end for the autocorrect engine."""
from .web import app, main, serve

__all__ = ["app", "main", "serve"]
