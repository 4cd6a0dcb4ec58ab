from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    service_url: str = Field(
        "https://ec.europa.eu/taxation_customs/vies/services/checkVatService", pattern=r"^https?://.*$"
    )
    user_agent: str = "vies-client"
    timeout: float = Field(30.0, gt=0)

    # faultcode of the "member state database is down" fault, see services.vies
    server_fault_code: str = "soap:Server"

    model_config = SettingsConfigDict(env_prefix="VIES_")


settings = Settings()
