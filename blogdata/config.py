"""
Storage settings for the blog data layer.

Settings come from three places, later ones winning:
- field defaults,
- the "BlogApiJsonDirectAccessSetting" section of a JSON settings file,
- BLOGDATA_* environment variables.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_pascal

from blogdata.exceptions import ConfigurationError

SETTINGS_SECTION = "BlogApiJsonDirectAccessSetting"

CONFIG_FILE_ENV = "BLOGDATA_CONFIG"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "BLOGDATA_DATA_PATH": "data_path",
    "BLOGDATA_POSTS_FOLDER": "blog_posts_folder",
    "BLOGDATA_CATEGORIES_FOLDER": "categories_folder",
    "BLOGDATA_TAGS_FOLDER": "tags_folder",
}


class StorageSettings(BaseModel):
    """Root data directory and the folder name used for each entity type."""
    data_path: str = "data"
    blog_posts_folder: str = "BlogPosts"
    categories_folder: str = "Categories"
    tags_folder: str = "Tags"

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    @property
    def root(self) -> Path:
        return Path(self.data_path)

    @property
    def blog_posts_dir(self) -> Path:
        return self.root / self.blog_posts_folder

    @property
    def categories_dir(self) -> Path:
        return self.root / self.categories_folder

    @property
    def tags_dir(self) -> Path:
        return self.root / self.tags_folder


def _read_settings_file(config_path: Path) -> Dict[str, Any]:
    """Return the settings section of a JSON settings file.

    A file without the section is treated as holding the settings at top level.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must hold a JSON object")

    section = data.get(SETTINGS_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{SETTINGS_SECTION}' in {config_path} must be a JSON object")
    return section


def load_settings(config_path: Optional[Path] = None) -> StorageSettings:
    """Build settings from an optional settings file and the environment.

    Args:
        config_path: JSON settings file. Defaults to $BLOGDATA_CONFIG when set.

    Returns:
        Validated StorageSettings

    Raises:
        ConfigurationError: If the settings file or a value is invalid
    """
    if config_path is None and os.environ.get(CONFIG_FILE_ENV):
        config_path = Path(os.environ[CONFIG_FILE_ENV])

    values: Dict[str, Any] = {}
    if config_path is not None:
        values.update(_read_settings_file(Path(config_path)))

    for env_name, field_name in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values.pop(to_pascal(field_name), None)
            values[field_name] = env_value

    try:
        return StorageSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid storage settings: {e}") from e


def ensure_directories(settings: StorageSettings) -> None:
    """Create the data root and the per-type folders if they are missing."""
    for directory in (
        settings.root,
        settings.blog_posts_dir,
        settings.categories_dir,
        settings.tags_dir,
    ):
        directory.mkdir(parents=True, exist_ok=True)


# Global instance for easy import
_settings = None

def get_settings() -> StorageSettings:
    """Get the process-wide storage settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
