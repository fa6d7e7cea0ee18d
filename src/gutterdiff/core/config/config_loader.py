# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

import pydantic
from loguru import logger
from pydantic import BaseModel, TypeAdapter

from gutterdiff.constants import ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from gutterdiff.core.exceptions import ConfigurationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class LoadedConfig(Generic[ModelT]):
    config: ModelT
    # names of the sources that contributed at least one key
    sources: list[str] = field(default_factory=list)
    # some field fell back to its model default
    used_defaults: bool = False


class ConfigLoader:
    """Merges configuration from several sources into one validated model."""

    @staticmethod
    def get_full_config(
        config_model: type[ModelT],
        input_args: dict,
        local_config_path: Path = LOCAL_CONFIG_FILE,
        env_app_prefix: str = ENV_APP_PREFIX,
        global_config_path: Path = GLOBAL_CONFIG_FILE,
        custom_config_path: Path | None = None,
    ) -> LoadedConfig[ModelT]:
        """
        Build the config with priority: input args, custom config, local
        config, environment variables, global config.

        Raises:
            ConfigurationError: if the merged values fail validation
        """
        named_sources = [
            ("Input Args", input_args),
            ("Local Config", ConfigLoader.load_toml(local_config_path)),
            ("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        if custom_config_path is not None:
            # custom config sits right below explicit arguments
            named_sources.insert(
                1, ("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )

        for name, source in named_sources:
            logger.debug(f"{name=} {source=}")

        return ConfigLoader.build(config_model, named_sources)

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Read a TOML file, returning an empty dict if it is missing or invalid."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Collect PREFIX_* environment variables, keyed by the lower-cased suffix."""
        data = {}
        for k, v in os.environ.items():
            if k.lower().startswith(app_prefix.lower()):
                data[k[len(app_prefix) :].lower()] = v
        return data

    @staticmethod
    def build(
        config_model: type[ModelT], named_sources: list[tuple[str, dict]]
    ) -> LoadedConfig[ModelT]:
        """Take each field from the highest priority source that provides it."""
        remaining_keys = set(config_model.model_fields.keys())
        final_data = {}
        used = []

        for name, source in named_sources:
            if not remaining_keys:
                break

            contributions = source.keys() & remaining_keys
            if contributions:
                used.append(name)
                for key in contributions:
                    final_data[key] = source[key]
                remaining_keys -= contributions

        try:
            model = TypeAdapter(config_model).validate_python(final_data)
        except pydantic.ValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e)) from e

        return LoadedConfig(
            config=model, sources=used, used_defaults=bool(remaining_keys)
        )
