"""
general.
=======

Shared general-purpose helpers (config loading, topic logging) used across the
generation and tile-distribution code.
"""
