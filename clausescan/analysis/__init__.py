from clausescan.analysis.analyzer import ContractAnalyzer
from clausescan.analysis.base import BaseContractAnalyzer
from clausescan.analysis.factory import AnalyzerFactory
from clausescan.analysis.request import build_analysis_request

__all__ = [
    "AnalyzerFactory",
    "BaseContractAnalyzer",
    "ContractAnalyzer",
    "build_analysis_request",
]
