from clausescan.analysis.exceptions import InsufficientTextError
from clausescan.analysis.models import AnalysisRequest

MIN_CONTRACT_TEXT_LENGTH = 50


def build_analysis_request(
    text: str,
    *,
    contract_type: str = "other",
    user_role: str = "other",
    jurisdiction: str = "",
    min_length: int = MIN_CONTRACT_TEXT_LENGTH,
) -> AnalysisRequest:
    """Build an AnalysisRequest, refusing text too short to analyze.

    Raises:
        InsufficientTextError: if the stripped text is shorter than ``min_length``.
    """
    if len(text.strip()) < min_length:
        raise InsufficientTextError(
            "Could not extract sufficient text from the document. Please try a "
            "different file format or ensure the PDF contains selectable text."
        )
    return AnalysisRequest(
        contract_text=text,
        contract_type=contract_type,
        user_role=user_role,
        jurisdiction=jurisdiction.strip(),
    )
