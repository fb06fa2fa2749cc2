from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    listen_address: str = ":9666"
    log_level: str = "INFO"
    upstream_url: str = "https://query1.finance.yahoo.com/v7/finance/quote"
    upstream_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (compatible; yquotes-exporter)"
    fail_on_fetch_error: bool = False

    model_config = {"env_prefix": "YQUOTES_"}


settings = Settings()
