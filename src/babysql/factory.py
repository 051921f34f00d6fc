"""Entry points that create a builder per statement kind"""

from pathlib import Path
from typing import Optional, Union

from babysql.builder import StatementBuilder
from babysql.config import BuilderSettings, load_settings
from babysql.types import StatementKind


class StatementFactory:
    """Creates builders that share one set of settings"""

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings

    @classmethod
    def from_profile(
        cls, profile: str, path: Optional[Union[str, Path]] = None
    ) -> "StatementFactory":
        """Factory seeded from a profile in babysql.toml"""
        return cls(load_settings(profile, path))

    def _new(self, kind: StatementKind, table: str) -> StatementBuilder:
        return StatementBuilder(kind, table, settings=self.settings)

    def select(self, table: str) -> StatementBuilder:
        return self._new(StatementKind.SELECT, table)

    def count(self, table: str) -> StatementBuilder:
        return self._new(StatementKind.COUNT, table)

    def insert(self, table: str) -> StatementBuilder:
        return self._new(StatementKind.INSERT, table)

    def update(self, table: str) -> StatementBuilder:
        return self._new(StatementKind.UPDATE, table)

    def delete(self, table: str) -> StatementBuilder:
        return self._new(StatementKind.DELETE, table)

    def __repr__(self) -> str:
        return f"StatementFactory(settings={self.settings!r})"


def select(table: str, settings: Optional[BuilderSettings] = None) -> StatementBuilder:
    """SELECT builder for table"""
    return StatementFactory(settings).select(table)


def count(table: str, settings: Optional[BuilderSettings] = None) -> StatementBuilder:
    """SELECT COUNT(...) builder for table"""
    return StatementFactory(settings).count(table)


def insert(table: str, settings: Optional[BuilderSettings] = None) -> StatementBuilder:
    """INSERT builder for table"""
    return StatementFactory(settings).insert(table)


def update(table: str, settings: Optional[BuilderSettings] = None) -> StatementBuilder:
    """UPDATE builder for table"""
    return StatementFactory(settings).update(table)


def delete(table: str, settings: Optional[BuilderSettings] = None) -> StatementBuilder:
    """DELETE builder for table"""
    return StatementFactory(settings).delete(table)
