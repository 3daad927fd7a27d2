"""Application configuration via environment variables."""

from typing import Any, Callable, Optional, Union

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./klarna_checkout.db"
    database_echo: bool = False  # Log every SQL statement
    log_level: str = "INFO"
    default_region: str = "us"
    url_protocol: str = "http"
    store_name: str = "Default Store"
    store_url: str = "localhost:8000"

    # Literal URL, or a callable taking (store, order). None builds the order URL.
    confirmation_url: Optional[Union[str, Callable[[Any, Any], str]]] = None

    klarna_api_url: str = "https://api.playground.klarna.com"
    klarna_username: str = ""
    klarna_password: str = ""
    klarna_timeout: float = 10.0

    use_mock_client: bool = True
    mock_failure_rate: float = 0.0
    mock_latency_ms: int = 50  # Simulated provider latency

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
