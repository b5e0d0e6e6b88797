from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MATCHWATCH_", extra="ignore")

    SERVER_URL: str = "http://api.sportliveserver.abrdns.com"

    FETCH_TIMEOUT_SECONDS: float = 15
    USER_AGENT: str = (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    )

    # modal phase delays
    MODAL_OPEN_DELAY_MS: int = 12
    MODAL_CLOSE_DELAY_MS: int = 260

    SEARCH_DEBOUNCE_MS: int = 160

    # rendering
    SKELETON_COUNT: int = 6
    HOME_SKELETON_COUNT: int = 4
    HOME_PREVIEW_LIMIT: int = 4

    LOG_LEVEL: str = "INFO"

settings = Settings()
