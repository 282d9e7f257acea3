"""配置管理"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated
from urllib.parse import quote

from pydantic import BaseModel, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """数据库配置"""

    host: str = "localhost"
    port: int = Field(default=5432, ge=1, le=65535)
    name: str = "sns"
    user: str = "postgres"
    password: SecretStr = SecretStr("")

    # 完整连接串（设置后覆盖上面的字段，测试中用于 SQLite）
    dsn: str | None = None

    # 连接池与超时（秒）
    pool_size: int = Field(default=20, ge=1)
    max_overflow: int = Field(default=10, ge=0)
    pool_timeout: float = Field(default=30, gt=0)
    command_timeout: float = Field(default=10, gt=0)

    @computed_field
    @property
    def url(self) -> str:
        """构建数据库连接 URL"""
        if self.dsn:
            return self.dsn
        user = quote(self.user, safe="")
        password = quote(self.password.get_secret_value(), safe="")
        return f"postgresql+asyncpg://{user}:{password}@{self.host}:{self.port}/{self.name}"


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        extra="ignore",
    )

    # 必填字段：JWT 签名密钥
    secret_key: SecretStr

    # 应用配置
    app_name: str = "Simple SNS"
    debug: bool = False
    access_token_expire_minutes: int = Field(default=30, ge=1)

    # 日志
    log_level: str = "INFO"
    log_json: bool = False
    log_to_file: bool = False
    log_dir: str = "logs"

    # 数据库（嵌套配置）
    db: DatabaseConfig = DatabaseConfig()

    # CORS（空列表=不启用，环境变量用逗号分隔）
    cors_origins: Annotated[list[str], NoDecode] = []

    @computed_field
    @property
    def database_url(self) -> str:
        """数据库连接 URL（供 SQLAlchemy 使用）"""
        return self.db.url

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            msg = f"log_level must be one of {allowed}"
            raise ValueError(msg)
        return upper

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """全局单例"""
    return Settings()
