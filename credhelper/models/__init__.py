"""Data models for credhelper."""

from credhelper.models.target import TargetUri

__all__ = [
    "TargetUri",
]
