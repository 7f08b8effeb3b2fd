"""Domain adapter interfaces.

Import from this package rather than individual modules to avoid coupling
callers to specific module paths.
"""

from .base import ResourceAdapter
from .errors import AdapterError

__all__ = ["AdapterError", "ResourceAdapter"]
