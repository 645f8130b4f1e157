import tomllib
from pathlib import Path
from typing import Literal

import tomlkit
from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixed_point_math.constants import STROOP
from fixed_point_math.exceptions import FixedPointValueError
from fixed_point_math.logging import logger
from fixed_point_math.types import get_integer_type

CONFIG_DIR = Path.home() / ".config" / "fixed_point_math"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FIXED_POINT_")

    # Default denominator for scaled ratios
    scale: PositiveInt = STROOP
    default_type: str = "i128"
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("default_type", mode="after")
    def validate_default_type(
        cls,  # noqa: N805
        default_type: str,
    ) -> str:
        """
        Validate the integer type, normalizing aliases to the short form, e.g. "int128" -> "i128".
        """

        try:
            int_type = get_integer_type(default_type)
        except FixedPointValueError as exc:
            raise ValueError(exc.message) from exc
        return f"{'i' if int_type.signed else 'u'}{int_type.bits}"


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration file to {config_path}.")


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
logger.setLevel(settings.log_level)
