"""
Pure algorithms with no domain-specific dependencies.

Modules:
    sweep       - Overlap detection between axis-aligned boxes
"""
