"""I/O utilities for spurgear."""

from .profile_json import SCHEMA_ID, profile_to_json, profile_from_json

__all__ = ['SCHEMA_ID', 'profile_to_json', 'profile_from_json']
