from .client import IndexyClient
from .payments import payment_hooks

__all__ = ["IndexyClient", "payment_hooks"]
