# (c) Copyright IBM Corp. 2025

from typing import Any, Dict

import yaml

from lsfinder.log import logger


class ConfigReader:
    """
    Loads the YAML configuration file of lsfinder.  A file that cannot be read
    or parsed is reported and treated as empty, so discovery falls back to the
    other configuration sources.
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        self.data: Dict[str, Any] = {}
        if file_path:
            self.load_file()
        else:
            logger.warning("ConfigReader: No configuration file specified")

    def load_file(self) -> None:
        """Loads and parses the YAML file"""
        try:
            with open(self.file_path, "r", encoding="utf-8") as file:
                self.data = yaml.safe_load(file) or {}
        except FileNotFoundError:
            logger.error(f"ConfigReader: Configuration file not found: {self.file_path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                f"ConfigReader: Cannot read configuration file {self.file_path}: {e}"
            )
        except yaml.YAMLError as e:
            logger.error(f"ConfigReader: Error parsing YAML file: {e}")
