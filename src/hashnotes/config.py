"""
Configuration for HashNotes.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Persistence backend configuration."""

    backend: str = "file"  # file, memory
    data_dir: str = "data"


class SearchConfig(BaseModel):
    """Field weights used by the scoring engine."""

    hashtag_weight: float = 10.0
    title_weight: float = 8.0
    keywords_weight: float = 6.0
    blueprint_nodes_weight: float = 6.0
    definitions_weight: float = 4.0
    content_weight: float = 2.0
    pinned_bonus: float = 1.0
    # Optional cap on ranked results (None = unlimited)
    limit: int | None = None


class NotesConfig(BaseModel):
    """Note store behaviour."""

    seed_on_empty: bool = True
    duplicate_suffix: str = " (Copy)"
    max_title_length: int = 120
    max_image_bytes: int = 10 * 1024 * 1024


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    notes: NotesConfig = Field(default_factory=NotesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            HASHNOTES_STORAGE_BACKEND: Persistence backend (file, memory)
            HASHNOTES_DATA_DIR: Directory for the file backend
            HASHNOTES_SEARCH_LIMIT: Max ranked results (optional)
            HASHNOTES_SEED_ON_EMPTY: Seed sample notes into an empty store
            HASHNOTES_DUPLICATE_SUFFIX: Title suffix for duplicated notes
            HASHNOTES_MAX_IMAGE_BYTES: Max accepted image size
            HASHNOTES_LOG_LEVEL: Log level
            HASHNOTES_LOG_TO_FILE: Also write JSON logs to files
        """
        # Load .env file if provided or exists
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            # If value is empty string, return default
            if value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            # Convert numeric strings
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            storage=StorageConfig(
                backend=get_env("HASHNOTES_STORAGE_BACKEND", "file"),
                data_dir=get_env("HASHNOTES_DATA_DIR", "data"),
            ),
            search=SearchConfig(
                hashtag_weight=get_env("HASHNOTES_SEARCH_HASHTAG_WEIGHT", 10.0),
                title_weight=get_env("HASHNOTES_SEARCH_TITLE_WEIGHT", 8.0),
                keywords_weight=get_env("HASHNOTES_SEARCH_KEYWORDS_WEIGHT", 6.0),
                blueprint_nodes_weight=get_env("HASHNOTES_SEARCH_BLUEPRINT_NODES_WEIGHT", 6.0),
                definitions_weight=get_env("HASHNOTES_SEARCH_DEFINITIONS_WEIGHT", 4.0),
                content_weight=get_env("HASHNOTES_SEARCH_CONTENT_WEIGHT", 2.0),
                pinned_bonus=get_env("HASHNOTES_SEARCH_PINNED_BONUS", 1.0),
                limit=get_env("HASHNOTES_SEARCH_LIMIT"),
            ),
            notes=NotesConfig(
                seed_on_empty=get_env("HASHNOTES_SEED_ON_EMPTY", True),
                duplicate_suffix=get_env("HASHNOTES_DUPLICATE_SUFFIX", " (Copy)"),
                max_title_length=get_env("HASHNOTES_MAX_TITLE_LENGTH", 120),
                max_image_bytes=get_env("HASHNOTES_MAX_IMAGE_BYTES", 10 * 1024 * 1024),
            ),
            logging=LoggingConfig(
                level=get_env("HASHNOTES_LOG_LEVEL", "INFO"),
                log_to_file=get_env("HASHNOTES_LOG_TO_FILE", False),
                log_dir=get_env("HASHNOTES_LOG_DIR", "logs"),
                file_rotation=get_env("HASHNOTES_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("HASHNOTES_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("HASHNOTES_LOG_COMPRESSION", "zip"),
                serialize=get_env("HASHNOTES_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Env sections that differ from defaults override YAML
        final_dict = {**config_dict}
        default = cls()
        if env_config.storage != default.storage:
            final_dict["storage"] = env_config.storage.model_dump()
        if env_config.search != default.search:
            final_dict["search"] = env_config.search.model_dump()
        if env_config.notes != default.notes:
            final_dict["notes"] = env_config.notes.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
