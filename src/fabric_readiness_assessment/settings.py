"""Service settings for the Fabric Readiness Assessment engine.

Business-parameter defaults mirror the value calculator's starting sliders.
All settings use the FABRIC_ASSESSMENT_ env prefix.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for fabric-readiness-assessment.

    Environment variable prefix: FABRIC_ASSESSMENT_
    """

    service_name: str = "fabric-readiness-assessment"

    # Value calculator defaults
    default_organization_size: int = Field(default=500, gt=0)
    default_current_annual_costs: float = Field(default=500_000.0, gt=0)
    default_average_hourly_rate: float = Field(default=75.0, gt=0)

    # Questionnaire defaults
    default_industry: str = "general"
    default_competitor: str = "aws"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Report generation
    report_template_version: str = "1.0"

    model_config = SettingsConfigDict(env_prefix="FABRIC_ASSESSMENT_")
