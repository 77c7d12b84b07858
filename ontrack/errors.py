"""
Exceptions raised by the degree progress engine.

Only load-time and input problems are exceptions. A requirement that is not
met, or a breadth/depth check that finds nothing, is a normal result.
"""


class OnTrackError(Exception):
    """Base class for all engine errors."""


class CourseNotFound(OnTrackError):
    """One or more student-supplied course codes are not in the catalog."""

    def __init__(self, codes):
        self.codes = list(codes)
        super().__init__(f"Unknown course code(s): {', '.join(self.codes)}")


class RuleFileMissing(OnTrackError, FileNotFoundError):
    """A rule, breadth, catalog or source document does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Data file not found: {path}")


class MalformedRule(OnTrackError, ValueError):
    """A document could not be parsed, or a requirement has an unknown shape."""
