"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from clausescan.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis. No AI provider is configured.",
        "overallRiskScore": 0,
        "flaggedClauses": [],
        "nextSteps": {
            "immediateActions": [],
            "negotiationTips": [],
            "questionsToAsk": [],
            "redFlags": [],
            "professionalAdvice": "",
        },
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
