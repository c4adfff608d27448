"""
Error types for Darwin.
Structured errors carrying a machine-readable code and details.
"""

from typing import Any, Dict, List, Optional


class DarwinError(Exception):
    """Base exception for Darwin errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable error payload."""
        return {
            "error": {
                "code": self.code,
                "message": str(self),
                "details": self.details,
            }
        }


class InvalidCandidateError(DarwinError):
    """Raised when a candidate is built from an empty gene sequence."""

    def __init__(self, reason: str = "Genes cannot be empty"):
        super().__init__(reason, "INVALID_CANDIDATE", {"reason": reason})


class EmptyGenePoolError(DarwinError):
    """Raised when random genes are requested from an empty gene pool."""

    def __init__(self):
        super().__init__("Gene pool cannot be empty", "EMPTY_GENE_POOL")


class ConfigurationError(DarwinError):
    """Raised when an engine or operator configuration is invalid."""

    def __init__(self, errors: List[str]):
        message = "Invalid configuration"
        if errors:
            message = f"{message}: {'; '.join(errors)}"
        super().__init__(message, "INVALID_CONFIG", {"errors": list(errors)})
        self.errors = list(errors)


class UnknownOperatorError(DarwinError):
    """Raised when an operator name is not registered."""

    def __init__(self, family: str, name: str, valid_names: List[str]):
        super().__init__(
            f"Unknown {family} operator: {name}",
            "UNKNOWN_OPERATOR",
            {"family": family, "name": name, "valid_names": valid_names},
        )


class UnknownProblemError(DarwinError):
    """Raised when a benchmark problem name is not registered."""

    def __init__(self, name: str, valid_names: List[str]):
        super().__init__(
            f"Unknown problem: {name}",
            "UNKNOWN_PROBLEM",
            {"name": name, "valid_names": valid_names},
        )
