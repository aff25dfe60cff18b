from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Variables use the ``APIRESULT_`` prefix (e.g. ``APIRESULT_EXPOSE_ERROR_DETAILS``).
    A .env file is also read if present.
    """

    # Put the text of unhandled exceptions in the 500 body (never enable in production)
    expose_error_details: bool = False

    # Let install_exception_handlers() set up JSON logging on stdout
    configure_logging: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="APIRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
