"""Resource namespaces for the Novu client."""

from .changes import Changes

__all__ = ["Changes"]
