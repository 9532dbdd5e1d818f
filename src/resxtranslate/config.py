import copy
import logging
import pathlib
from typing import Any

import yaml

from resxtranslate import resx

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "defaults": {
        "tag": resx.DEFAULT_TAG,
        "file_pattern": resx.RESX_PATTERN,
        "worklist": "translations.xml",
    },
}


def load_config(config_folder: str | pathlib.Path) -> dict[str, Any]:
    """Read ``config.yml`` from ``config_folder`` on top of the built-in defaults.

    A missing file is not fatal; a file that isn't valid YAML raises
    ``yaml.YAMLError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file_path = pathlib.Path(config_folder).absolute() / "config.yml"

    try:
        with open(config_file_path, "r") as file:
            loaded = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"File not found: {config_file_path}, using default configuration.")
        return config

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def configure_logging(config: dict[str, Any]) -> None:
    logging.basicConfig(
        level=logging.getLevelName(config["logging"]["level"]),
        format=config["logging"]["format"],
        datefmt=config["logging"]["datefmt"],
    )
