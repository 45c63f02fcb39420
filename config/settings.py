from typing import Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from config.logging_config import log


load_dotenv()

BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/100.0.4896.127 Safari/537.36"


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing at startup."""


class Settings(BaseSettings):
    GOOGLE_SHEET_ID: str = ""
    CONTACT_EMAIL: str = ""
    GOOGLE_SERVICE_ACCOUNT_KEY_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Scraper configurations
    BASE_URL: str = "https://www.kijiji.ca"
    REQUEST_TIMEOUT: int = 30
    SCRAPE_DELAY_SECONDS: float = 7

    # Storage layout
    NEW_LISTINGS_SHEET: str = "New Listings"
    NEW_LISTINGS_CLEAR_RANGE: str = "A1:F1000"

    SCHEDULE_INTERVAL_HOURS: int = 24

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def user_agent(self) -> str:
        if self.CONTACT_EMAIL:
            return f"{BROWSER_USER_AGENT} (Python Scraper Bot; +mailto:{self.CONTACT_EMAIL})"
        return f"{BROWSER_USER_AGENT} (Python Scraper Bot)"


def load_settings(**overrides) -> Settings:
    """
    Build the run configuration once at startup.
    A missing sheet id is fatal; a missing contact email only degrades the User-Agent.
    """
    settings = Settings(**overrides)
    if not settings.GOOGLE_SHEET_ID.strip():
        raise ConfigurationError("GOOGLE_SHEET_ID environment variable not set.")
    if not settings.CONTACT_EMAIL.strip():
        log.warning("CONTACT_EMAIL environment variable not set. User-Agent will be less informative.")
    return settings
