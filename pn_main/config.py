"""Server configuration.

Values are fixed constants. The command line may override them for a
single run; the environment is not consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


class Config:
    """Fixed configuration constants."""

    # Host and port to serve on
    SERVER_HOST = "0.0.0.0"
    SERVER_PORT = 3000

    # Where log files are created, and the tag used in their names
    LOG_PATH = "./logs/"
    LOG_STAMP = "pn-main"

    # Record debug-level log entries; only errors are recorded when False
    DEBUG_MODE = True

    HOME_HTML_PATH = _PACKAGE_DIR / "web" / "pages" / "home" / "home.html"


@dataclass(frozen=True)
class ServerConfig:
    """Resolved configuration for one server run."""

    host: str
    port: int
    log_dir: Path
    log_stamp: str
    debug: bool
    home_html_path: Path

    @classmethod
    def default(cls) -> ServerConfig:
        return cls(
            host=Config.SERVER_HOST,
            port=Config.SERVER_PORT,
            log_dir=Path(Config.LOG_PATH),
            log_stamp=Config.LOG_STAMP,
            debug=Config.DEBUG_MODE,
            home_html_path=Config.HOME_HTML_PATH,
        )
