"""Utilities for loading and merging tool settings manifests."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from ..conversion import TOOL_INFORMATION_URI, TOOL_NAME, TOOL_VERSION
from ..errors import IaCValidationError
from ..models import ToolDriver

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "IAC_VALIDATION_CONFIG"

_DEFAULT_MANIFEST = Path(__file__).resolve().parent / "manifests" / "defaults.yaml"


class SettingsError(IaCValidationError):
    """Raised when settings manifests cannot be loaded or parsed."""


@dataclass(slots=True)
class SarifSettings:
    """Tool identity written into the SARIF ``driver`` block."""

    tool_name: str = TOOL_NAME
    tool_version: str = TOOL_VERSION
    information_uri: str = TOOL_INFORMATION_URI

    def driver(self) -> ToolDriver:
        return ToolDriver(
            name=self.tool_name,
            version=self.tool_version,
            information_uri=self.information_uri,
        )


@dataclass(slots=True)
class Settings:
    """Merged configuration for the validator and the SARIF converter."""

    failure_expression: str = ""
    sarif: SarifSettings = field(default_factory=SarifSettings)
    sources: List[Path] = field(default_factory=list)


class SettingsLoader:
    """Load settings manifests and merge them over the packaged defaults."""

    def __init__(self, default_manifests: Sequence[Path | str] | None = None) -> None:
        manifest_paths: List[Path]
        if default_manifests is None:
            manifest_paths = []
            if _DEFAULT_MANIFEST.exists():
                manifest_paths.append(_DEFAULT_MANIFEST)
        else:
            manifest_paths = [Path(path) for path in default_manifests]

        self._default_manifests = manifest_paths

    # ------------------------------------------------------------------
    def load(
        self,
        manifests: Sequence[Path | str] | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> Settings:
        """Return settings merged from defaults and ``manifests``.

        When no manifests are given, the path in ``IAC_VALIDATION_CONFIG``
        (if set) is used instead.
        """

        manifest_paths = [Path(path) for path in self._default_manifests]
        if manifests:
            manifest_paths.extend(Path(path) for path in manifests)
        else:
            environ = os.environ if env is None else env
            from_env = environ.get(CONFIG_ENV_VAR)
            if from_env:
                manifest_paths.append(Path(from_env))

        settings = Settings()
        for manifest_path in manifest_paths:
            data = self._load_manifest(manifest_path)
            self._apply(settings, data, manifest_path)
            settings.sources.append(manifest_path)

        return settings

    # ------------------------------------------------------------------
    def _apply(self, settings: Settings, data: Mapping[str, Any], path: Path) -> None:
        validation = self._mapping(data, "validation", path)
        if "failure_expression" in validation:
            expression = validation["failure_expression"]
            settings.failure_expression = "" if expression is None else str(expression)

        sarif = self._mapping(data, "sarif", path)
        for key in ("tool_name", "tool_version", "information_uri"):
            if sarif.get(key):
                setattr(settings.sarif, key, str(sarif[key]))

    def _mapping(self, data: Mapping[str, Any], key: str, path: Path) -> Dict[str, Any]:
        section = data.get(key)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise SettingsError(f"'{key}' in settings manifest {path} must be a mapping")
        return dict(section)

    def _load_manifest(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise SettingsError(f"Settings manifest not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsError(f"Failed to read settings manifest {path}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in settings manifest {path}") from exc

        if not isinstance(data, Mapping):
            raise SettingsError(f"Settings manifest must be a mapping: {path}")

        logger.debug("Loaded settings manifest %s", path)
        return dict(data)


__all__ = [
    "CONFIG_ENV_VAR",
    "SarifSettings",
    "Settings",
    "SettingsError",
    "SettingsLoader",
]
