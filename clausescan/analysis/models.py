from dataclasses import dataclass, field

RISK_LEVELS = ("low", "medium", "high")


@dataclass(frozen=True)
class AnalysisRequest:
    """Input of one contract analysis call."""

    contract_text: str
    contract_type: str = "other"
    user_role: str = "other"
    jurisdiction: str = ""


@dataclass(frozen=True)
class FlaggedClause:
    """A contract clause the model considers risky."""

    id: str
    text: str
    clause_type: str
    risk_level: str
    risk_score: float
    explanation: str
    suggestion: str


@dataclass(frozen=True)
class NextSteps:
    """Advice on what to do after reading the analysis."""

    immediate_actions: list[str] = field(default_factory=list)
    negotiation_tips: list[str] = field(default_factory=list)
    questions_to_ask: list[str] = field(default_factory=list)
    red_flags: list[str] = field(default_factory=list)
    professional_advice: str = ""


@dataclass(frozen=True)
class ContractAnalysis:
    """Output of the analysis step."""

    summary: str
    overall_risk_score: float
    flagged_clauses: list[FlaggedClause] = field(default_factory=list)
    next_steps: NextSteps = field(default_factory=NextSteps)
