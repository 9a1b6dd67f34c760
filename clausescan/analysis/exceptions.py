class AnalysisError(Exception):
    """Raised when contract analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the analysis response has an unusable shape."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class InsufficientTextError(AnalysisError):
    """Raised when too little text was extracted to analyze a contract."""
