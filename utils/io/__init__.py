"""
Terminal helpers.
"""
