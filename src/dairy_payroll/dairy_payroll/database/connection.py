from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "dairy_payroll"
    connect_timeout: int = 10

    @classmethod
    def from_dict(cls, settings: dict) -> "DBConfig":
        defaults = cls()
        return cls(
            host=str(settings.get("host") or defaults.host),
            port=int(settings.get("port") or defaults.port),
            user=str(settings.get("user") or defaults.user),
            password=str(settings.get("password") or ""),
            database=str(settings.get("database") or defaults.database),
            connect_timeout=int(settings.get("connect_timeout") or defaults.connect_timeout),
        )

    def connect_kwargs(self, *, with_database: bool = True) -> dict:
        kwargs = {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "connection_timeout": self.connect_timeout,
            "charset": "utf8mb4",
            "autocommit": False,
        }
        if with_database:
            kwargs["database"] = self.database
        return kwargs


class DatabaseConnection:
    """Hands out short-lived MySQL connections, one per repository call.

    Instances are shared per DBConfig, so the app and its scripts talking to
    the same database reuse one factory.
    """

    _instances: ClassVar[Dict[DBConfig, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if config not in cls._instances:
            logger.debug("new connection factory for %s@%s/%s", config.user, config.host, config.database)
            cls._instances[config] = cls(config)
        return cls._instances[config]

    def connect(self, *, with_database: bool = True):
        # autocommit stays off: every write goes through db_cursor's commit/rollback
        return mysql.connector.connect(**self._config.connect_kwargs(with_database=with_database))
