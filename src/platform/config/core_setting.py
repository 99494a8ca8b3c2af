from pathlib import Path

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Sales Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    SERVICE_NAME: str = 'ticket-sales'

    # Sales
    TICKET_PRICE: int = 100  # smallest currency unit, same for every event
    ADMINISTRATOR_ID: str = 'administrator'

    # Notifications
    NOTIFICATION_BUFFER_SIZE: int = 10  # per-subscriber stream buffer
    NOTIFICATION_HISTORY_SIZE: int = 1000  # notifications kept for inspection

    # Logging
    LOG_TO_FILE: bool = False
    LOG_ROTATION: str = '1 hour'
    LOG_RETENTION: str = '7 days'

    @field_validator('TICKET_PRICE')
    @classmethod
    def validate_ticket_price(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('TICKET_PRICE must be over 0')
        return v

    @field_validator('NOTIFICATION_BUFFER_SIZE', 'NOTIFICATION_HISTORY_SIZE')
    @classmethod
    def validate_notification_sizes(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f'{info.field_name} cannot be negative')
        return v

    @field_validator('ADMINISTRATOR_ID', mode='before')
    @classmethod
    def strip_administrator_id(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError('ADMINISTRATOR_ID is required')
        return v


settings = Settings()  # type: ignore
