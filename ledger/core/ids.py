"""
Identifier generation.

A ULID packs a millisecond timestamp followed by 80 random bits, so ids
sort roughly by creation time and collide only if two calls in the same
millisecond draw the same random component.
"""

from ulid import ULID


def generate_id(prefix: str = "") -> str:
    """Opaque id such as ``evt-01JB3W6K3Q8Y5T3E0M2XG9D7RN``. Not cryptographically unique."""
    return f"{prefix}{str(ULID())}"
