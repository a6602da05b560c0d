# citywheels/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # читаем .env, лишние ключи не роняют приложение
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # База данных
    DATABASE_URL: str = "mysql+pymysql://root:@localhost:3306/CityWheelsPK"
    AUTO_CREATE_TABLES: bool = True

    # Логи
    LOG_LEVEL: str = "INFO"

    # HTTP-сервер (uvicorn)
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Тариф: base + distance * units
    BASE_FARE: int = 100
    DISTANCE_FARE: int = 10
    FIXED_DISTANCE_UNITS: int = 5


settings = Settings()
