class StringAnalyzerError(Exception):
    """Base class for expected, caller-facing outcomes"""


class InvalidInput(StringAnalyzerError):
    """Input failed basic shape or non-emptiness checks"""


class Conflict(StringAnalyzerError):
    """A record with the same id already exists"""


class NotFound(StringAnalyzerError):
    """No record with the requested id exists"""


class Unparseable(StringAnalyzerError):
    """Natural language query matched no known phrase"""
