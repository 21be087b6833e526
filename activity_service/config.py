from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # "sqlite://" is an in-memory database that lives as long as the process
    DATABASE_URL: str = "sqlite://"
    SECRET_KEY: str = "dev-secret-activities"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_MINUTES: int = 60
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
