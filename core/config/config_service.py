"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, get_type_hints

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "core").is_dir() and (parent / "clockwork").is_dir():
            return parent
    return here.parent

PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "core" / "config"
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
MACHINE_INI = CONFIG_DIR / "config.ini"

ENV_PREFIX = "TIMEBUTTON_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "General": {
        "title": "ClockApplication",
        "width": "250",
        "height": "150",
    },
    "Clock": {
        "use_12h": "true",
        "tick_interval_ms": "1000",
        "font_family": "Arial",
        "font_size": "30",
        "timezone": "",
    },
    "Assets": {
        "icon_12h": "clockwork/assets/usa.ppm",
        "icon_24h": "clockwork/assets/eu.ppm",
        "icon_width": "40",
        "icon_height": "25",
    },
    "Logging": {
        "level": "INFO",
        "file": "",
    },
}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be cast to its declared type."""


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class GeneralConfig:
    title: str = "ClockApplication"
    width: int = 250
    height: int = 150

    def __post_init__(self) -> None:
        _require_positive(self, "width", "height")


@dataclass
class ClockConfig:
    use_12h: bool = True
    tick_interval_ms: int = 1000
    font_family: str = "Arial"
    font_size: int = 30
    timezone: str = ""

    def __post_init__(self) -> None:
        _require_positive(self, "tick_interval_ms", "font_size")


@dataclass
class AssetsConfig:
    icon_12h: Path = Path("clockwork/assets/usa.ppm")
    icon_24h: Path = Path("clockwork/assets/eu.ppm")
    icon_width: int = 40
    icon_height: int = 25

    def __post_init__(self) -> None:
        _require_positive(self, "icon_width", "icon_height")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _require_positive(obj: Any, *names: str) -> None:
    for name in names:
        if getattr(obj, name) <= 0:
            raise ValueError(f"{name} must be positive")


def _cast(value: Any, typ: type) -> Any:
    if typ is Path:
        return Path(str(value)).expanduser()
    if typ is bool:
        if isinstance(value, bool):
            return value
        state = configparser.ConfigParser.BOOLEAN_STATES.get(str(value).strip().lower())
        if state is None:
            raise ValueError("expected one of 1/0, true/false, yes/no, on/off")
        return state
    if typ is int:
        return int(value)
    if typ is float:
        return float(value)
    return typ(value)


def _build_dataclass(cls: type, data: Dict[str, Any], section: str) -> Any:
    hints = get_type_hints(cls)
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        try:
            kwargs[field.name] = _cast(val, hints[field.name])
        except (TypeError, ValueError) as ex:
            raise ConfigError(f"[{section}] {field.name}: invalid value {val!r} ({ex})") from ex
    try:
        return cls(**kwargs)
    except ValueError as ex:
        raise ConfigError(f"[{section}] {ex}") from ex


def _env_overlays(environ: Optional[Dict[str, str]] = None) -> Dict[str, Dict[str, Any]]:
    environ = os.environ if environ is None else environ
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "TimeButton" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "timebutton" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(
        self,
        *,
        defaults_ini: Path = DEFAULTS_INI,
        machine_ini: Path = MACHINE_INI,
        user_ini: Optional[Path] = None,
        environ: Optional[Dict[str, str]] = None,
    ) -> None:
        self._defaults_ini = defaults_ini
        self._machine_ini = machine_ini
        self._user_ini = user_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        merged: Dict[str, Dict[str, Any]] = {}
        sources: Dict[Tuple[str, str], Dict[str, str]] = {}

        # Layer 0: embedded defaults
        _apply(merged, _DEFAULTS, "code", "embedded", sources)

        # Layer 1: defaults.ini
        if self._defaults_ini.exists():
            _apply(merged, _read_ini(self._defaults_ini), "defaults.ini",
                   str(self._defaults_ini), sources)

        # Layer 2: environment variables
        _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

        # Layer 3: machine config
        if self._machine_ini.exists():
            _apply(merged, _read_ini(self._machine_ini), "machine",
                   str(self._machine_ini), sources)

        # Layer 4: user overrides
        user_ini = self._user_ini or _user_config_path()
        if user_ini.exists():
            _apply(merged, _read_ini(user_ini), "user", str(user_ini), sources)

        # Build everything first so an invalid value leaves the previous state intact
        general = _build_dataclass(GeneralConfig, merged.get("General", {}), "General")
        clock = _build_dataclass(ClockConfig, merged.get("Clock", {}), "Clock")
        assets = _build_dataclass(AssetsConfig, merged.get("Assets", {}), "Assets")
        logging_cfg = _build_dataclass(LoggingConfig, merged.get("Logging", {}), "Logging")

        self._merged = merged
        self._sources = sources
        self.general = general
        self.clock = clock
        self.assets = assets
        self.logging = logging_cfg

    # ------------------------------------------------------------------ #
    def resolve_path(self, path: Path) -> Path:
        """Resolve a configured path; relative paths are taken from the project root."""
        return path if path.is_absolute() else PROJECT_ROOT / path

    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
