from pydantic_settings import BaseSettings, SettingsConfigDict

from circleci_client.core.constants import CIRCLECI_API_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    # API token, appended to every request as a query parameter
    CIRCLE_TOKEN: str = ""
    CIRCLE_API_URL: str = CIRCLECI_API_URL

    # Transport Settings
    CIRCLE_HTTP_TIMEOUT: float = DEFAULT_TIMEOUT
    CIRCLE_RAISE_FOR_STATUS: bool = False

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


settings = Settings()
