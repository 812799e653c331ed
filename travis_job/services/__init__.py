# Services module - external API integrations
from .travis import TravisClient

__all__ = ["TravisClient"]
