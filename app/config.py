from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ENV: str = "local"  # Environment setting
    LOG_LEVEL: str = "INFO"

    # Auth settings
    AUTH_HEADER: str = "x-auth"
    PASSWORD_MIN_LENGTH: int = 6
    BCRYPT_ROUNDS: int = 12

    class Config:
        env_file = ".env"

settings = Settings()
