from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from clausescan.analysis.models import AnalysisRequest, ContractAnalysis
from clausescan.documents.models import DocumentText, RawDocument


@dataclass(slots=True)
class PipelineContext:
    path: Path
    contract_type: str = "other"
    user_role: str = "other"
    jurisdiction: str = ""
    mime_type: str | None = None
    document: RawDocument | None = None
    document_text: DocumentText | None = None
    analysis_request: AnalysisRequest | None = None
    analysis: ContractAnalysis | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
