"""
emoticon_generator
==================

Does: Root package initializer for the emoticon generator project.
Returns: Exposes the `generation` and `tiles` subpackages through a stable namespace.
Used by: The CLI and all imports starting from `emoticon_generator.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
