"""Custom exception hierarchy for Kurotto formula compilation."""


class KurottoError(Exception):
    """Base exception for compiler failures."""


class ConfigurationError(KurottoError):
    """Raised when a grid cannot be numbered within the literal width."""


class ConstraintValueError(KurottoError, ValueError):
    """Raised when a clue value or cell falls outside the grid's range."""


class ClueSourceError(KurottoError):
    """Raised when a puzzle clue file cannot be parsed."""


class DimacsError(KurottoError):
    """Raised when DIMACS text is malformed."""
