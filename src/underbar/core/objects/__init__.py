"""Object merging operations."""

from underbar.core.objects.operations import defaults, extend

__all__ = [
    "extend",
    "defaults",
]
