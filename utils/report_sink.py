from datetime import datetime
from pathlib import Path

from loguru import logger


class ReportSink:
    """Append-only audit trail, one '<timestamp> : <message>' line per write."""

    TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, path):
        self.path = Path(path)

    def write(self, message: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        line = f"{datetime.now().strftime(self.TIME_FORMAT)} : {message}\n"
        # single small append per line; concurrent writers interleave whole lines
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line)
        logger.info(f"[report] {message}")

    def lines(self) -> list[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()
