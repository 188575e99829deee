# armpose/config.py
"""
Store connection settings.

Defaults below can be overridden through ARMPOSE_* environment variables or
by building a StoreConfig directly.
"""
import os
import re
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import URL, make_url

# ---- Store coordinates ----
DB_DRIVER   = "mysql+pymysql"
DB_HOST     = "localhost"
DB_PORT     = 3306
DB_USER     = "root"
DB_PASSWORD = ""
DB_NAME     = "robot_arm"

# ---- Query ----
POSE_TABLE    = "poses"
RECENCY_FIELD = "created_at"
DB_TIMEOUT    = 5.0   # seconds, connect + read

# ---- HTTP ----
API_PREFIX = "/api/v1"
HTTP_HOST  = "0.0.0.0"
HTTP_PORT  = 8000

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class StoreConfig:
    """Where the pose table lives and how long to wait for it."""
    host: str = DB_HOST
    port: int = DB_PORT
    user: str = DB_USER
    password: str = DB_PASSWORD
    database: str = DB_NAME
    driver: str = DB_DRIVER
    url: Optional[str] = None
    table: str = POSE_TABLE
    timeout: float = DB_TIMEOUT

    def __post_init__(self):
        if not _IDENT_RE.match(self.table):
            raise ValueError(f"invalid pose table name: {self.table!r}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def sqlalchemy_url(self) -> URL:
        if self.url:
            return make_url(self.url)
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    @classmethod
    def from_env(cls, environ=None) -> "StoreConfig":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("ARMPOSE_DB_HOST", DB_HOST),
            port=int(env.get("ARMPOSE_DB_PORT", DB_PORT)),
            user=env.get("ARMPOSE_DB_USER", DB_USER),
            password=env.get("ARMPOSE_DB_PASSWORD", DB_PASSWORD),
            database=env.get("ARMPOSE_DB_NAME", DB_NAME),
            driver=env.get("ARMPOSE_DB_DRIVER", DB_DRIVER),
            url=env.get("ARMPOSE_DB_URL") or None,
            table=env.get("ARMPOSE_POSE_TABLE", POSE_TABLE),
            timeout=float(env.get("ARMPOSE_DB_TIMEOUT", DB_TIMEOUT)),
        )
