from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    ENVIRONMENT: str = 'development'
    PUBLIC_DIR: str = 'public'
    LOG_LEVEL: str = 'INFO'

    SESSION_COOKIE_NAME: str = 'session'
    SESSION_EXPIRES_DAYS: int = 14
    SKIP_AUTH: bool = False
    DEV_USER_ID: str = 'dev-user'

    FIREBASE_PROJECT_ID: str = ''
    FIREBASE_CLIENT_EMAIL: str = ''
    FIREBASE_PRIVATE_KEY: str = ''
    FIREBASE_DATABASE_URL: str = ''
    FIREBASE_STORAGE_BUCKET: str = ''

    API_HOST: str = '0.0.0.0'
    API_PORT: int = 8000

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == 'production'


settings = Settings()
