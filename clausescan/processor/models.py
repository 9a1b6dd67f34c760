from dataclasses import dataclass

from clausescan.analysis.models import ContractAnalysis
from clausescan.documents.models import DocumentText


@dataclass(frozen=True)
class ProcessorResult:
    """What a full processing run hands back to the caller."""

    file_name: str
    document_text: DocumentText
    analysis: ContractAnalysis | None = None
