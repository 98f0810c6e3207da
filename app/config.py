from pydantic_settings import BaseSettings
from pydantic import Field

DEV_SECRET_KEY = "dev-secret-change-me"

class Settings(BaseSettings):
    app_name: str = "Task & Invoice API"
    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    secret_key: str = Field(DEV_SECRET_KEY, alias="SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str = Field(default=None, alias="DATABASE_URL")

    upload_dir: str = Field("storage", alias="UPLOAD_DIR")
    upload_max_kb: int = Field(5120, alias="UPLOAD_MAX_KB")

    rate_limit_window_seconds: int = Field(60, alias="RATE_LIMIT_WINDOW_SECONDS")
    rate_limit_max_calls: int = Field(60, alias="RATE_LIMIT_MAX_CALLS")

    use_sp_invoices: bool = Field(False, alias="USE_SP_INVOICES")
    allow_role_self_assignment: bool = Field(True, alias="ALLOW_ROLE_SELF_ASSIGNMENT")

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    def validate_runtime(self) -> None:
        if self.app_env.lower() == "production" and self.secret_key == DEV_SECRET_KEY:
            raise RuntimeError("SECRET_KEY must be set in production.")

settings = Settings()
