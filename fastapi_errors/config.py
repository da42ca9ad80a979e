from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorHandlerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ERROR_HANDLER_")

    # Show exception details in client-facing bodies
    display_error_details: bool = False

    # Diagnostic log line per handled error
    log_errors: bool = True
    log_error_details: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> ErrorHandlerSettings:
    return ErrorHandlerSettings()
