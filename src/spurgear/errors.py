"""Exceptions raised by the gear geometry core.

All of them derive from :class:`GearError`, itself a ``ValueError``, so
callers that only care about "bad input" can catch a single type.
"""


class GearError(ValueError):
    """Base exception for spurgear errors."""
    pass


class InvalidGearSpec(GearError):
    """Raised when gear parameters cannot describe a gear."""
    pass


class DomainError(GearError):
    """Raised when an involute is evaluated at or inside its base circle."""
    pass


class InvalidArgument(GearError):
    """Raised when a sampling or pattern argument is out of range."""
    pass


class InvalidCylinderSpec(GearError):
    """Raised when lightening cylinder parameters are invalid."""
    pass


class PresetError(GearError):
    """Raised when a parameter preset is missing or malformed."""
    pass


__all__ = [
    "GearError",
    "InvalidGearSpec",
    "DomainError",
    "InvalidArgument",
    "InvalidCylinderSpec",
    "PresetError",
]
