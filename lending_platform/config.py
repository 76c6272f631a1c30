"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from lending_platform.domain.models import LendingCriteria


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "lending-platform"
    log_level: str = "INFO"

    # Lending criteria
    min_borrowing_amount: float = 100_000
    max_borrowing_amount: float = 1_500_000
    high_value_threshold: float = 1_000_000
    high_value_min_credit_score: int = 950
    high_value_max_ltv: float = 60.0

    def lending_criteria(self) -> LendingCriteria:
        """Underwriting thresholds; the LTV tier ladder keeps its defaults"""
        return LendingCriteria(
            min_borrowing_amount=self.min_borrowing_amount,
            max_borrowing_amount=self.max_borrowing_amount,
            high_value_threshold=self.high_value_threshold,
            high_value_min_credit_score=self.high_value_min_credit_score,
            high_value_max_ltv=self.high_value_max_ltv,
        )


settings = Settings()
