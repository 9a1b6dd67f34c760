"""AI-powered contract risk analyzer."""

import json
import re
from pathlib import Path

from clausescan.analysis.base import BaseContractAnalyzer
from clausescan.analysis.client_base import BaseAnalysisClient
from clausescan.analysis.exceptions import AnalysisError
from clausescan.analysis.models import AnalysisRequest, ContractAnalysis
from clausescan.analysis.prompt_loader import load_prompt_template
from clausescan.analysis.validator import validate_and_build
from clausescan.logging.logger import Log

_JSON_FENCED_BLOCK = re.compile(r"```json\s*(.*?)```", re.DOTALL)
_FENCED_BLOCK = re.compile(r"```\s*(.*?)```", re.DOTALL)


def humanize(value: str) -> str:
    """Turn an identifier like ``business_owner`` into ``Business Owner``."""
    return " ".join(word.capitalize() for word in value.replace("_", " ").split())


class ContractAnalyzer(BaseContractAnalyzer):
    """Analyzes contract text for risky clauses using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.3,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_template = load_prompt_template("analysis_system_prompt", prompt_dir)
        self._user_template = load_prompt_template("analysis_user_prompt", prompt_dir)

    async def analyze(self, request: AnalysisRequest) -> ContractAnalysis:
        system_prompt, user_prompt = self._build_prompts(request)
        Log.debug(f"Analysis prompt:\n{user_prompt}")

        raw_response = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(
            f"Analysis complete: risk {result.overall_risk_score}, "
            f"{len(result.flagged_clauses)} clauses flagged"
        )
        return result

    def _build_prompts(self, request: AnalysisRequest) -> tuple[str, str]:
        contract_type = humanize(request.contract_type)
        user_role = humanize(request.user_role)
        jurisdiction = request.jurisdiction
        system_prompt = self._system_template.format(
            contract_type=contract_type,
            user_role=user_role,
        )
        user_prompt = self._user_template.format(
            contract_type=contract_type,
            user_role=user_role,
            location=f" located in {jurisdiction}" if jurisdiction else "",
            legal_context=(
                f"{jurisdiction} laws and regulations"
                if jurisdiction
                else "general contract law principles"
            ),
            contract_text=request.contract_text,
        )
        return system_prompt, user_prompt

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        fenced = _JSON_FENCED_BLOCK.search(cleaned) or _FENCED_BLOCK.search(cleaned)
        if fenced:
            cleaned = fenced.group(1).strip()

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(
                f"Failed to parse analysis results: {exc}"
            ) from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
