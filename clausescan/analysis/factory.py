from clausescan.analysis.analyzer import ContractAnalyzer
from clausescan.analysis.base import BaseContractAnalyzer
from clausescan.analysis.example_client_adapter import ExampleClientAdapter
from clausescan.analysis.openai_client_adapter import OpenAIClientAdapter
from clausescan.config.providers import resolve_base_url
from clausescan.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured contract analyzer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseContractAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ContractAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        base_url = resolve_base_url(
            provider, settings.analysis_base_url, "analysis_base_url"
        )
        client = OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=base_url,
        )
        return ContractAnalyzer(
            client=client,
            model=settings.analysis_model_name,
            temperature=settings.analysis_temperature,
        )
