import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from config.pages import ENV, URLS

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Timeouts:
    element: float = 10.0  # waiting for an element the flow needs
    probe: float = 2.0  # looking for something that is usually absent (error banners)
    poll: float = 0.5
    retry_attempts: int = 3
    retry_backoff: float = 2.0


@dataclass(frozen=True)
class Settings:
    urls: dict = field(default_factory=lambda: dict(URLS[ENV]))
    report_dir: Path = PROJECT_ROOT / "reports"
    ui_report_file: str = "TestResults.txt"
    api_report_file: str = "ApiTestResults.txt"
    credentials_file: Path = PROJECT_ROOT / "data" / "test_credentials.json"
    timeouts: Timeouts = field(default_factory=Timeouts)
    headless: bool = True
    api_timeout: float = 60.0
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def ui_report_path(self) -> Path:
        return self.report_dir / self.ui_report_file

    @property
    def api_report_path(self) -> Path:
        return self.report_dir / self.api_report_file


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Defaults overridden by environment variables."""
    timeouts = Timeouts()
    if os.getenv("ELEMENT_TIMEOUT"):
        timeouts = Timeouts(element=float(os.environ["ELEMENT_TIMEOUT"]))

    kwargs = {"timeouts": timeouts, "headless": _env_bool("HEADLESS", True)}
    if os.getenv("REPORT_DIR"):
        kwargs["report_dir"] = Path(os.environ["REPORT_DIR"])
    if os.getenv("CREDENTIALS_FILE"):
        kwargs["credentials_file"] = Path(os.environ["CREDENTIALS_FILE"])
    if os.getenv("LOG_LEVEL"):
        kwargs["log_level"] = os.environ["LOG_LEVEL"]
    if os.getenv("LOG_FILE"):
        kwargs["log_file"] = os.environ["LOG_FILE"]
    return Settings(**kwargs)
