from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- DB 設定 ---
    DATABASE_URL: str = "sqlite:///./coursereview.db"
    DROP_TABLES_IF_EXIST: bool = False
    INITIALIZE_WITH_SAMPLE_DATA: bool = True

    # --- Server ---
    HOST: str = "127.0.0.1"
    PORT: int = 7000

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # 設定檔配置
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True
    )

settings = Settings()
