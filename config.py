"""
YatzyBoard Configuration

Centralized settings, paths, and constants for the application.
"""

import logging
import sys
from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "YatzyBoard"
APP_AUTHOR = "YatzyBoard"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores the scoreboard database)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def database(self) -> Path:
        return self.data_dir / "yatzyboard.db"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "yatzyboard.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class StorageKeys:
    """Keys under which the scoreboard is stored."""
    players: str = "yahtzee-scoreboard-players"
    categories: str = "yahtzee-scoreboard-categories"
    game_mode: str = "yahtzee-scoreboard-game-mode"


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 720
    min_height: int = 640

    # Font size
    title_font_size: int = 22

    # Grid column widths
    category_column_width: int = 220
    player_column_width: int = 110

    # Status bar message duration in milliseconds
    status_timeout_ms: int = 4000


# Singleton instances
PATHS = Paths()
STORAGE_KEYS = StorageKeys()
UI_SETTINGS = UISettings()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()


def init_logging(level: int = logging.INFO) -> None:
    """Send application logs to stderr and the log file."""
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    try:
        file_handler = logging.FileHandler(PATHS.log_file, encoding="utf-8")
    except OSError as e:
        root.warning("Log file unavailable (%s), logging to stderr only", e)
        return
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
