from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGODB_URI: str | None = None
    MONGODB_DB_NAME: str = "devevents"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
