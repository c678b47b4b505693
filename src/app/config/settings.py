"""Typed runtime settings loaded from ``config.yml``.

Settings are an explicit value: build one with :func:`load_settings` and pass
it to the factories that need it (API app, service, repositories).
"""

from __future__ import annotations

import os
import pathlib
import re
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = pathlib.Path(__file__).resolve().parent / "config.yml"
CONFIG_ENV_VAR = "CERTGEN_CONFIG"
PRODUCTION_BRANCH = "prod"

_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}")


class FunctionNames(BaseModel):
    model_config = ConfigDict(extra="ignore")

    defects: str = "cvs-svc-defects"
    testStations: str = "cvs-svc-test-stations"
    trailerRegistration: str = "cvs-svc-trailer-registration"
    testResults: str = "cvs-svc-test-results"
    techRecords: str = "cvs-svc-technical-records-v3"


class InvokeSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    endpoint: str = "http://localhost:3013"
    timeout_seconds: float = 30.0
    functions: FunctionNames = Field(default_factory=FunctionNames)


class RetrySettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    attempts: int = Field(default=3, ge=1)


class SignatureSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    bucket: str = "local"
    root: str = "./signatures"


class DocumentSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    directory: str = "CVS"
    names: dict[str, str] = Field(default_factory=dict)


class WelshSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    enabled: bool = False


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    level: str = "INFO"
    json_output: bool = Field(default=False, alias="json")


class Settings(BaseModel):
    """Root settings object."""

    model_config = ConfigDict(extra="ignore")

    branch: str = "local"
    invoke: InvokeSettings = Field(default_factory=InvokeSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    signature: SignatureSettings = Field(default_factory=SignatureSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)
    welsh: WelshSettings = Field(default_factory=WelshSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def is_production(self) -> bool:
        return self.branch == PRODUCTION_BRANCH


def substitute_env(text: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace ``${VAR}`` / ``${VAR:default}`` placeholders in ``text``."""

    env = os.environ if environ is None else environ

    def _replace(match: re.Match[str]) -> str:
        value = env.get(match.group("name"))
        if value is not None:
            return value
        return match.group("default") or ""

    return _PLACEHOLDER.sub(_replace, text)


def _read_yaml(path: pathlib.Path, environ: Mapping[str, str] | None) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(substitute_env(handle.read(), environ)) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration '{path}' must be a mapping.")
    return data


def load_settings(
    path: str | pathlib.Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from ``path``, ``$CERTGEN_CONFIG`` or the bundled config.yml."""

    env = os.environ if environ is None else environ
    target = pathlib.Path(path or env.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    return Settings.model_validate(_read_yaml(target, env))


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "PRODUCTION_BRANCH",
    "FunctionNames",
    "InvokeSettings",
    "RetrySettings",
    "SignatureSettings",
    "DocumentSettings",
    "WelshSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
    "substitute_env",
]
