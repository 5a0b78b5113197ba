"""
Exceptions raised by the box finding pipeline.

InvalidInput is a user-facing error: it is raised once, by grid validation,
before any geometry is computed. InternalInvariantViolation signals a defect
and is never caught by the pipeline.
"""


class BoxSweepError(Exception):
    """Base class for every error raised by this project."""


class InvalidInput(BoxSweepError, ValueError):
    """Empty input, ragged rows, or a glyph outside the alphabet."""


class InternalInvariantViolation(BoxSweepError, AssertionError):
    """A contract between two pipeline stages was broken."""
