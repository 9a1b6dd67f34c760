from abc import ABC, abstractmethod

from clausescan.analysis.models import AnalysisRequest, ContractAnalysis


class BaseContractAnalyzer(ABC):
    """Contract for all contract analysis adapters."""

    @abstractmethod
    async def analyze(self, request: AnalysisRequest) -> ContractAnalysis:
        """Assess the risks of a contract.

        Args:
            request: Gated contract text plus the reader's context.

        Returns:
            ContractAnalysis with summary, risk score, clauses and next steps.

        Raises:
            AnalysisError: on any failure.
        """
