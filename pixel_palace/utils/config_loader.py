"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config/default.yaml (or an explicit path). Sections map onto the
dataclasses below; missing sections and keys keep their defaults and
unknown keys are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..games.space_invaders.config import SpaceInvadersConfig

logger = logging.getLogger(__name__)


@dataclass
class VisualizationConfig:
    """Window settings."""
    render_fps: int = 60
    scale: float = 1.0
    title: str = "Pixel Palace - Space Invaders"


@dataclass
class AudioConfig:
    """Sound effect settings."""
    enabled: bool = True
    sample_rate: int = 22050
    volume: float = 1.0


@dataclass
class StorageConfig:
    """Where high scores and preferences are kept."""
    path: str = "~/.pixel_palace/scores.json"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: SpaceInvadersConfig = field(default_factory=SpaceInvadersConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    possible_paths = [
        Path("config") / "default.yaml",
        Path(__file__).parent.parent.parent / "config" / "default.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config/default.yaml)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()

    config = Config()

    if 'game' in data:
        config.game = SpaceInvadersConfig.from_dict(data['game'])

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'audio' in data:
        config.audio = _dict_to_dataclass(data['audio'], AudioConfig)

    if 'storage' in data:
        config.storage = _dict_to_dataclass(data['storage'], StorageConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
