"""
Runtime Configuration

Reads the service configuration from BOOKLIB_* environment variables once at
import time and exposes it as the module-level ``settings`` object.

Includes:
- Database URL and data directory resolution
- Log directory and level
- Bind host/port for the uvicorn entry point
- bcrypt cost factor (lowered in tests)
"""
import os
import logging
from pathlib import Path

from sqlalchemy.engine import make_url

from constants import ServerConfig, PasswordPolicy

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = 'false') -> bool:
    """Interpret an environment variable as a boolean flag."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


class AppConfig:
    """Resolved configuration values."""

    def __init__(self):
        self.data_dir = Path(
            os.environ.get('BOOKLIB_DATA_DIR', str(Path.home() / '.booklibrary'))
        ).expanduser()
        self.database_url = os.environ.get(
            'BOOKLIB_DATABASE_URL',
            f"sqlite:///{self.data_dir / 'library.db'}"
        )
        self.log_dir = Path(
            os.environ.get('BOOKLIB_LOG_DIR', str(self.data_dir / 'logs'))
        ).expanduser()
        self.log_level = os.environ.get('BOOKLIB_LOG_LEVEL', 'INFO').upper()
        self.host = os.environ.get('BOOKLIB_HOST', ServerConfig.HOST)
        self.port = _env_int('BOOKLIB_PORT', ServerConfig.PORT)
        self.bcrypt_rounds = _env_int('BOOKLIB_BCRYPT_ROUNDS', PasswordPolicy.BCRYPT_ROUNDS)
        self.sql_echo = _env_flag('BOOKLIB_SQL_ECHO')

    @property
    def display_database_url(self) -> str:
        """Database URL with any password masked, for logs."""
        return make_url(self.database_url).render_as_string(hide_password=True)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith('sqlite')

    def ensure_directories(self):
        """Create the data and log directories if they are missing."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def __repr__(self):
        return (
            f"AppConfig(database_url={self.display_database_url!r}, log_dir={str(self.log_dir)!r}, "
            f"host={self.host!r}, port={self.port})"
        )


settings = AppConfig()
