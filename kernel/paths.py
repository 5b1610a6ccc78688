"""Alias-aware path and URL resolution relative to the plugin directory."""

from __future__ import annotations

import logging
import os
from typing import Dict

from .context import PluginContext


logger = logging.getLogger(__name__)

ALIAS_MARKER = "@"

DEFAULT_ALIASES: Dict[str, str] = {
    "app": "app",
    "config": "config",
    "routes": "routes",
    "resources": "resources",
    "views": "resources/views",
    "lang": "resources/lang",
    "assets": "resources/assets",
    "database": "database",
    "migrations": "database/migrations",
    "storage": "storage",
    "logs": "storage/logs",
    "cache": "storage/cache",
}


class Paths:
    """Resolve ``@alias/remainder`` shorthands into plugin paths and URLs.

    ``paths.path("@views/welcome.html")`` resolves the ``views`` alias and
    hands ``resources/views/welcome.html`` to the context. Input without the
    leading marker, or naming an unknown alias, is used as a literal
    relative path.
    """

    def __init__(self, context: PluginContext) -> None:
        self._context = context
        self._aliases: Dict[str, str] = dict(DEFAULT_ALIASES)

    def alias(self, name: str, relative_path: str) -> "Paths":
        self._aliases[name] = relative_path
        return self

    @property
    def aliases(self) -> Dict[str, str]:
        return dict(self._aliases)

    def resolve(self, value: str) -> str:
        """Return the relative path for ``value`` after alias substitution."""

        if not value.startswith(ALIAS_MARKER):
            return value

        head, _, remainder = value.partition("/")
        base = self._aliases.get(head[len(ALIAS_MARKER):])
        if base is None:
            return value
        return f"{base}/{remainder}" if remainder else base

    def path(self, value: str = "") -> str:
        return self._context.path(self.resolve(value))

    def url(self, value: str = "") -> str:
        return self._context.url(self.resolve(value))

    def exists(self, value: str) -> bool:
        return os.path.exists(self.path(value))

    def uploads(self, sub_path: str = "") -> str:
        """Return the plugin's upload directory, creating it on first use.

        With ``sub_path`` the returned location is a file or folder below the
        plugin upload root; its parent directory is created as well.
        """

        root = os.path.join(self._context.host.uploads_dir, self._context.slug)
        if not os.path.isdir(root):
            logger.debug("Creating upload directory %s", root)
            os.makedirs(root, exist_ok=True)

        if not sub_path:
            return root

        full_path = f"{root}/{sub_path.lstrip('/')}"
        parent = os.path.dirname(full_path)
        if not os.path.isdir(parent):
            os.makedirs(parent, exist_ok=True)
        return full_path


__all__ = ["ALIAS_MARKER", "DEFAULT_ALIASES", "Paths"]
