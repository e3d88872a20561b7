"""
Data access layer.

Each repository owns one entity collection and its on-disk folder.
"""
