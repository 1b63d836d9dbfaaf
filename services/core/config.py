from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class HealthEngineSettings(BaseSettings):
    log_level: str = "INFO"
    # Optional YAML override for the report narrative/resource table
    report_content_path: Optional[str] = None
    # YAML file holding section definitions (questions + option weights)
    assessment_sections_path: Optional[str] = None
    generator_seed: Optional[int] = None
    generator_user_count: int = 25

    model_config = SettingsConfigDict(env_prefix='BHC_')


def get_settings() -> HealthEngineSettings:
    """Builds a fresh settings object from the current environment."""
    return HealthEngineSettings()


# Instantiate settings
settings = HealthEngineSettings()


if __name__ == "__main__":
    print("Health Engine Configuration:")
    print(f"  Log level: {settings.log_level}")
    print(f"  Report content override: {settings.report_content_path or '(defaults)'}")
    print(f"  Assessment sections: {settings.assessment_sections_path or '(not set)'}")
    print(f"  Generator seed: {settings.generator_seed}")
    print(f"  Generator user count: {settings.generator_user_count}")
    print("\nTo override, set environment variables like BHC_LOG_LEVEL, BHC_REPORT_CONTENT_PATH, BHC_GENERATOR_SEED.")
