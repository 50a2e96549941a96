import logging
import sys

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── App ──────────────────────────────────────
    environment: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_log_level: str = "info"

    # ─── Auth ─────────────────────────────────────
    signing_key: str = "CHANGE_ME"
    access_token_expire_minutes: int = 60
    algorithm: str = "HS256"

    # ─── CORS ─────────────────────────────────────
    cors_origin: str = "http://localhost:3000"

    # ─── Database ─────────────────────────────────
    database_path: str = "./rental-manager.db"
    db_echo: bool = False

    # ─── Bootstrap admin ──────────────────────────
    admin_email: str = "admin@test.com"
    admin_password: str = "adminpassword"

    # ─── Authorization policy ─────────────────────
    # False keeps /all-properties open to every authenticated caller.
    all_properties_admin_only: bool = False

    model_config = {"env_file": [".env", "../.env"], "extra": "ignore"}

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.database_path}"


def _validate_secrets(s: Settings) -> None:
    """Abort startup if the signing key is missing or insecure."""
    errors: list[str] = []

    if s.signing_key in ("CHANGE_ME", "", "secret", "your_super_secret_key"):
        errors.append("SIGNING_KEY is not set or uses the default placeholder")
    elif len(s.signing_key) < 32:
        errors.append("SIGNING_KEY is too short (minimum 32 characters)")

    if s.environment == "production" and s.admin_password == "adminpassword":
        errors.append("ADMIN_PASSWORD uses the default bootstrap credential")

    if errors:
        if s.environment == "production":
            print("FATAL: Invalid secrets configuration:", file=sys.stderr)
            for e in errors:
                print(f"  - {e}", file=sys.stderr)
            sys.exit(1)
        else:
            log = logging.getLogger("rental_manager.config")
            for e in errors:
                log.warning("SECRET VALIDATION WARNING: %s", e)


settings = Settings()
_validate_secrets(settings)
