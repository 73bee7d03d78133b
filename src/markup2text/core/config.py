import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE_NAMES = [".markup2text.yaml", ".markup2text.yml", ".markup2text.toml"]


class Settings(BaseSettings):
    # Conversion
    CONVERSION: Literal["human", "tools"] = "tools"
    OUTPUT_SUFFIX: str = ".txt"  # Appended to the input file name
    OUTPUT_ENCODING: str = "utf-8"
    XML_RECOVER: bool = False  # Let lxml repair broken markup instead of failing

    # Placeholders for material that has no textual form (human output only)
    IMAGE_LABEL: str = "[Bild]"
    FORMULA_LABEL: str = "[Formel]"
    GAP_LABEL: str = "[…]"
    FOOTNOTE_LABEL: str = "[Fußnote:"

    # Observability
    LOG_FORMAT: Literal["json", "plain", "auto"] = "auto"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence.

        Without ``config_file`` the first of ``CONFIG_FILE_NAMES`` found in the
        working directory is used, if any.
        """
        if config_file:
            config_path: Optional[Path] = Path(config_file)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_file}")
        else:
            config_path = _discover_config_file()

        config_data = _read_config_file(config_path) if config_path else {}

        # Values given as keyword arguments beat env vars in pydantic-settings,
        # so drop the file values that the environment overrides
        overridden = {name for name in cls.model_fields if name in os.environ}
        return cls(**{k: v for k, v in config_data.items() if k not in overridden})


def _discover_config_file() -> Optional[Path]:
    for name in CONFIG_FILE_NAMES:
        path = Path(name)
        if path.exists():
            return path
    return None


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    if config_path.suffix in [".yaml", ".yml"]:
        import yaml  # type: ignore[import-untyped]

        with open(config_path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    if config_path.suffix == ".toml":
        import tomllib

        with open(config_path, "rb") as f:
            return tomllib.load(f)
    raise ValueError(f"Unsupported config file format: {config_path.suffix or config_path.name}")


# Default settings - replaced by load_config() during CLI startup
SETTINGS = Settings()
