"""Authorization helpers: bearer-token caller resolution and role gates."""

from .decorators import authorize

__all__ = ['authorize']
