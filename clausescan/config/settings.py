from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pattern"

    readability_min_length: int = 100
    readability_ratio_threshold: float = 0.30
    readability_domain_ratio_threshold: float = 0.15

    ocr_provider: str = "none"
    ocr_api_key: str = ""
    ocr_base_url: str = ""
    ocr_model_name: str = "google/gemini-2.5-flash"
    ocr_timeout_seconds: int = 120
    ocr_max_tokens: int = 16000
    ocr_temperature: float = 0.1
    ocr_endpoint_url: str = ""
    ocr_example_text: str = ""

    analysis_provider: str = "example"
    analysis_api_key: str = ""
    analysis_base_url: str = ""
    analysis_model_name: str = "google/gemini-3-flash-preview"
    analysis_timeout_seconds: int = 120
    analysis_temperature: float = 0.3

    min_analysis_text_length: int = 50
