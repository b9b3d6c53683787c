"""Snackboard Server Configuration."""

import secrets
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    app_name: str = "Snackboard"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Paths
    data_dir: Path = Path.home() / "snackboard" / "data"

    # Database (defaults to data_dir/snackboard.db)
    db_path: Optional[Path] = None

    # JWT
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 720  # 12 hours

    # Access codes (bcrypt)
    access_code_rounds: int = 12

    # Admin account created on first start
    admin_name: str = "ADMIN"
    admin_access_code: str = "admin"

    model_config = {"env_prefix": "SNACKBOARD_"}

    @property
    def database_path(self) -> Path:
        return self.db_path or self.data_dir / "snackboard.db"

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        for d in [self.data_dir, self.database_path.parent]:
            d.mkdir(parents=True, exist_ok=True)

    def ensure_secrets(self) -> None:
        """Generate the JWT secret if not set, persist it so tokens survive restarts."""
        secrets_file = self.data_dir / ".secrets"
        saved = {}
        if secrets_file.exists():
            for line in secrets_file.read_text().strip().splitlines():
                if "=" in line:
                    k, v = line.split("=", 1)
                    saved[k.strip()] = v.strip()

        if not self.jwt_secret:
            self.jwt_secret = saved.get("jwt_secret", "") or secrets.token_urlsafe(32)

        secrets_file.write_text(f"jwt_secret={self.jwt_secret}\n")


settings = Settings()
settings.ensure_dirs()
settings.ensure_secrets()
