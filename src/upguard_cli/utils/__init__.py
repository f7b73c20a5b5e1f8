"""Shared utility modules for upguard_cli."""

__all__ = [
    'config',
    'constants',
    'exceptions',
    'logger',
    'models',
]
