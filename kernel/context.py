"""Plugin identity record and the host conventions derived from it."""

from __future__ import annotations

import os
from functools import cached_property
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.config import Settings, get_settings


REQUIRED_KEYS = ("file", "slug", "prefix", "textDomain", "version")

TableScope = Literal["site", "network"]


class HostEnvironment(BaseModel):
    """Host-level conventions a plugin context needs to derive names and locations."""

    model_config = ConfigDict(frozen=True)

    table_prefix: str = "wp_"
    network_table_prefix: Optional[str] = None
    plugins_url: str = "http://localhost/wp-content/plugins"
    uploads_dir: str = "uploads"

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostEnvironment":
        return cls(
            table_prefix=settings.TABLE_PREFIX,
            network_table_prefix=settings.NETWORK_TABLE_PREFIX,
            plugins_url=settings.PLUGINS_URL,
            uploads_dir=settings.UPLOADS_DIR,
        )

    def plugin_dir_path(self, file: str) -> str:
        return os.path.join(os.path.dirname(file), "")

    def plugin_dir_url(self, file: str) -> str:
        directory = os.path.basename(os.path.dirname(file))
        return f"{self.plugins_url.rstrip('/')}/{directory}/"


class PluginContext(BaseModel):
    """Immutable identity of a single plugin instance.

    Single source of truth for the slug, key prefix, text domain, version and
    base location. Every prefixed name the plugin hands to the host (hooks,
    options, transients, cron events, meta keys, tables) is derived here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file: str
    slug: str
    prefix: str
    text_domain: str = Field(alias="textDomain")
    version: str
    host: HostEnvironment = Field(default_factory=HostEnvironment)

    @model_validator(mode="before")
    @classmethod
    def _require_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            present = set(data)
            missing = [
                key
                for key in REQUIRED_KEYS
                if key not in present and not (key == "textDomain" and "text_domain" in present)
            ]
            if missing:
                raise ValueError(f"Missing required config keys: {', '.join(missing)}")
        return data

    @classmethod
    def create(
        cls,
        config: Mapping[str, Any],
        host: Optional[HostEnvironment] = None,
    ) -> "PluginContext":
        """Build a context from a plugin config mapping.

        Host conventions come from the active settings unless given explicitly.
        """

        data = dict(config)
        if "host" not in data:
            data["host"] = host or HostEnvironment.from_settings(get_settings())
        return cls.model_validate(data)

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------
    @cached_property
    def base_path(self) -> str:
        return self.host.plugin_dir_path(self.file)

    @cached_property
    def base_url(self) -> str:
        return self.host.plugin_dir_url(self.file)

    def path(self, relative_path: str = "") -> str:
        if relative_path == "":
            return self.base_path
        return self.base_path + relative_path.lstrip("/\\")

    def url(self, relative_path: str = "") -> str:
        if relative_path == "":
            return self.base_url
        return self.base_url + relative_path.lstrip("/")

    # ------------------------------------------------------------------
    # Prefixed names
    # ------------------------------------------------------------------
    def hook(self, name: str) -> str:
        return self.prefix + name

    def option_key(self, key: str) -> str:
        return self.prefix + key

    def transient_key(self, key: str) -> str:
        return self.prefix + key

    def cron_hook(self, name: str) -> str:
        return self.prefix + name

    def meta_key(self, key: str) -> str:
        # Leading underscore hides the meta entry from the host's custom fields UI.
        return "_" + self.prefix + key

    def asset_handle(self, handle: str) -> str:
        return f"{self.slug}-{handle}"

    def table_name(self, name: str, scope: TableScope = "site") -> str:
        if scope == "site":
            host_prefix = self.host.table_prefix
        elif scope == "network":
            host_prefix = self.host.network_table_prefix or self.host.table_prefix
        else:
            raise ValueError(f"Unknown table scope '{scope}'")
        return host_prefix + self.prefix + name


__all__ = ["HostEnvironment", "PluginContext", "REQUIRED_KEYS", "TableScope"]
