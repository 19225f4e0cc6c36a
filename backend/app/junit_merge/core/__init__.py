"""Core package"""
from junit_merge.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
