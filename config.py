import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Student Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "False")
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if _env_flag("DEBUG", "False") else "WARNING").upper()

    # Catalog
    seed_sample_books: bool = _env_flag("LIBRARY_SEED_SAMPLES", "True")

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()
    confirm_exit: bool = _env_flag("CONFIRM_EXIT", "True")


settings = Settings()
