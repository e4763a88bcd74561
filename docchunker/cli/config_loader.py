from typing import Tuple
from pathlib import Path
import yaml

from ..config import (
    ChunkingSettings,
    DEFAULT_STRATEGY,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_OVERLAP,
    DEFAULT_MODEL,
)


class ConfigurationLoader:
    """Load and parse configuration files for the chunk command"""

    @staticmethod
    def load_chunking_config(config_path: str) -> Tuple[ChunkingSettings, str]:
        """
        Load configuration for chunk command

        Args:
            config_path: Path to YAML config file

        Returns:
            Tuple of (ChunkingSettings, log_level)
        """
        config_data = load_config_file(config_path)

        settings = ChunkingSettings(
            strategy=config_data.get('strategy', DEFAULT_STRATEGY),
            chunk_size=config_data.get('chunk_size', DEFAULT_CHUNK_SIZE),
            overlap=config_data.get('overlap', DEFAULT_OVERLAP),
            strip_non_ascii=config_data.get('strip_non_ascii', True),
            model=config_data.get('model', DEFAULT_MODEL),
        )

        log_level = config_data.get('log_level', 'INFO')

        return settings, log_level


def load_config_file(config_path: str) -> dict:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}
