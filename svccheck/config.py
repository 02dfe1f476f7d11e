import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    SVCCHECK_SERVICES: str = os.getenv("SVCCHECK_SERVICES", "")
    SVCCHECK_TIMEOUT: int = int(os.getenv("SVCCHECK_TIMEOUT", 5))
    SVCCHECK_REGISTRY_PATH: str | None = os.getenv("SVCCHECK_REGISTRY_PATH") or None
    SVCCHECK_LOG_LEVEL: str = os.getenv("SVCCHECK_LOG_LEVEL", "warning").lower()


settings = Settings()
