import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

log = logging.getLogger(__name__)


@dataclass
class SlimBaseConfig:
    locale: str = "en"
    fallback: str = "en"
    file: str = "messages"
    translation_roots: List[Path] = field(default_factory=list)


def resolve_locale(explicit: Optional[str] = None, default: str = "en") -> str:
    if explicit:
        return explicit

    # Priority 1: SLIMBASE_LANG
    slimbase_locale = os.getenv("SLIMBASE_LANG")
    if slimbase_locale:
        return slimbase_locale

    # Priority 2: system LANG, e.g. "fr_FR.UTF-8" -> "fr"
    system_locale = os.getenv("LANG")
    if system_locale:
        return system_locale.split("_")[0].split(".")[0].lower()

    return default


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> SlimBaseConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return SlimBaseConfig(locale=os.getenv("SLIMBASE_LANG") or "en")
    except tomllib.TOMLDecodeError as e:
        log.warning(f"Ignoring malformed {config_path}: {e}")
        return SlimBaseConfig(locale=os.getenv("SLIMBASE_LANG") or "en")

    slimbase_data: Dict[str, Any] = data.get("tool", {}).get("slimbase", {})
    base_dir = config_path.parent
    fallback = slimbase_data.get("fallback", "en")
    locale = os.getenv("SLIMBASE_LANG") or slimbase_data.get("locale", "en")
    if locale == "auto":
        locale = resolve_locale(default=fallback)

    # Create config with data from file, falling back to defaults.
    return SlimBaseConfig(
        locale=locale,
        fallback=fallback,
        file=slimbase_data.get("file", "messages"),
        translation_roots=[
            base_dir / root for root in slimbase_data.get("translation_roots", [])
        ],
    )
