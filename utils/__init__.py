"""
Shared utilities: grid validation, stream loading, rendering and algorithms.
"""
