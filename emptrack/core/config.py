# emptrack/core/config.py

from typing import Any, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Employee Tracker API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Employee, department and visit tracking API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드에서는 SQL 쿼리를 로그로 출력합니다.
    DEBUG_MODE: bool = Field(False, description="Enable SQL echo and verbose logging")
    LOG_LEVEL: str = Field("INFO", description="Root logging level (DEBUG, INFO, WARNING, ...)")

    # --- 데이터베이스 설정 ---
    # 비동기 드라이버 URL (sqlite+aiosqlite 또는 postgresql+asyncpg)
    DATABASE_URL: SecretStr = Field(
        SecretStr(f"sqlite+aiosqlite:///{os.path.join(BASE_DIR, 'data', 'emptrack.db')}"),
        description="Async SQLAlchemy database connection URL"
    )

    # --- 파일 업로드 설정 ---
    UPLOAD_DIR: str = Field(os.path.join(BASE_DIR, "uploads"), description="Directory for uploaded files.")
    UPLOAD_URL_PREFIX: str = Field("/uploads", description="URL path where uploaded files are served.")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 정적 마운트 경로는 항상 '/'로 시작하고 '/'로 끝나지 않도록 정규화합니다.
        self.UPLOAD_URL_PREFIX = "/" + self.UPLOAD_URL_PREFIX.strip("/")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.get_secret_value().startswith("sqlite")


settings = Settings()
