import logging
import os
from pathlib import Path

import tomlkit

from domain.models import ExportSettings
from shared.constants import APP_DIR_NAME

logger = logging.getLogger(__name__)


def _user_profiles_dir() -> Path:
    """
    Determine profiles directory.

    1) If <project_root>/configs/profiles exists, use it (run-from-repo setups).
    2) Otherwise, fall back to %APPDATA%/GZDMapper/configs/profiles
       or ~/AppData/Roaming/GZDMapper/configs/profiles when APPDATA is not set.
    """
    project_root = Path(__file__).resolve().parent.parent.parent
    local_profiles = project_root / 'configs' / 'profiles'
    if local_profiles.exists():
        return local_profiles

    return (
        Path(os.getenv('APPDATA') or (Path.home() / 'AppData' / 'Roaming'))
        / APP_DIR_NAME
        / 'configs'
        / 'profiles'
    )


def ensure_profiles_dir() -> Path:
    profiles_dir = _user_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)
    return profiles_dir


def list_profiles() -> list[str]:
    """Profile names without extension."""
    folder = ensure_profiles_dir()
    return sorted(p.stem for p in folder.glob('*.toml') if p.is_file())


def profile_path(name: str) -> Path:
    """Path to the profile file by name."""
    return ensure_profiles_dir() / f'{name}.toml'


def load_profile(name_or_path: str) -> ExportSettings:
    """
    Load and validate a TOML profile into ExportSettings.

    Accepts a profile name (without .toml) from the profiles directory
    or a path to a TOML file.
    """
    p = Path(name_or_path)
    path = (
        p if p.suffix.lower() == '.toml' and p.exists() else profile_path(name_or_path)
    )
    if not path.exists():
        msg = f'Profile not found: {path}'
        raise FileNotFoundError(msg)
    text = path.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()
    settings = ExportSettings.model_validate(data)
    logger.info('Loaded profile %s (zones=%d, include_polar=%s)', path, len(settings.zones), settings.include_polar)
    return settings


def save_profile(name: str, settings: ExportSettings) -> Path:
    """Save the profile as TOML (no atomic write, no backups)."""
    path = profile_path(name)
    data = settings.model_dump()
    text = tomlkit.dumps(data)
    path.write_text(text, encoding='utf-8')
    return path


def delete_profile(name: str) -> None:
    """Delete the profile file if it exists."""
    path = profile_path(name)
    if path.exists():
        path.unlink()
