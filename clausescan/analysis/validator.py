"""Builds a ContractAnalysis from the model's parsed JSON, filling gaps with defaults."""

from typing import Any

from clausescan.analysis.exceptions import AnalysisValidationError
from clausescan.analysis.models import RISK_LEVELS, ContractAnalysis, FlaggedClause, NextSteps

DEFAULT_SUMMARY = (
    "Contract analysis complete. Review the flagged clauses below for potential concerns."
)
DEFAULT_RISK_SCORE = 5.0
DEFAULT_CLAUSE_TEXT = "Clause text not available"
DEFAULT_CLAUSE_TYPE = "General"
DEFAULT_RISK_LEVEL = "medium"
DEFAULT_EXPLANATION = "Review this clause carefully."
DEFAULT_SUGGESTION = "Consider consulting with a legal professional."


def validate_and_build(data: dict[str, Any]) -> ContractAnalysis:
    """Validate raw parsed JSON and build a ContractAnalysis.

    Missing or mistyped scalar fields get defaults; only structurally
    unusable input is rejected.

    Raises:
        AnalysisValidationError: if a flagged clause is not an object.
    """
    summary = _string(data.get("summary")) or DEFAULT_SUMMARY
    overall = _score(data.get("overallRiskScore"))
    clauses = _build_clauses(data.get("flaggedClauses"))
    next_steps = _build_next_steps(data.get("nextSteps"))
    return ContractAnalysis(
        summary=summary,
        overall_risk_score=round(overall, 1),
        flagged_clauses=clauses,
        next_steps=next_steps,
    )


def _build_clauses(raw: Any) -> list[FlaggedClause]:
    if not isinstance(raw, list):
        return []
    return [_build_clause(item, index) for index, item in enumerate(raw)]


def _build_clause(raw: Any, index: int) -> FlaggedClause:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Clause at index {index} must be an object")
    risk_level = _string(raw.get("riskLevel")).lower()
    if risk_level not in RISK_LEVELS:
        risk_level = DEFAULT_RISK_LEVEL
    return FlaggedClause(
        id=_string(raw.get("id")) or f"clause-{index + 1}",
        text=_string(raw.get("text")) or DEFAULT_CLAUSE_TEXT,
        clause_type=_string(raw.get("clauseType")) or DEFAULT_CLAUSE_TYPE,
        risk_level=risk_level,
        risk_score=_score(raw.get("riskScore")),
        explanation=_string(raw.get("explanation")) or DEFAULT_EXPLANATION,
        suggestion=_string(raw.get("suggestion")) or DEFAULT_SUGGESTION,
    )


def _build_next_steps(raw: Any) -> NextSteps:
    if not isinstance(raw, dict):
        return NextSteps()
    return NextSteps(
        immediate_actions=_string_list(raw.get("immediateActions")),
        negotiation_tips=_string_list(raw.get("negotiationTips")),
        questions_to_ask=_string_list(raw.get("questionsToAsk")),
        red_flags=_string_list(raw.get("redFlags")),
        professional_advice=_string(raw.get("professionalAdvice")),
    )


def _string(raw: Any) -> str:
    return raw.strip() if isinstance(raw, str) else ""


def _string_list(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    return [item.strip() for item in raw if isinstance(item, str) and item.strip()]


def _score(raw: Any) -> float:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return DEFAULT_RISK_SCORE
    return float(raw)
