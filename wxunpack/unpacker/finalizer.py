"""
wxunpack Finalizer
Post-merge touches on the main package: plugin entry rewrite and the
devtools project config.
"""
import json
from pathlib import Path
from typing import Optional
from ..utils.logger import logger
from ..utils.fs import read_text, write_text
from ..config import config


class PluginInjector:
    def __init__(self, entry_script: str = None, require_line: str = None):
        self.entry_script = entry_script or config.entry_script
        self.require_line = require_line or config.plugin_require

    def inject(self, main_package: Optional[str]) -> bool:
        """Prepend the plugin require to the main package's entry script"""
        if not main_package:
            logger.warning("mainPackage not found!")
            return False

        entry = Path(main_package) / self.entry_script
        if not entry.exists():
            logger.warning(f"Plugin detected, but {entry} does not exist — plugin require was not written")
            return False

        logger.debug("Plugin detected, Write to main package...")
        write_text(entry, self.require_line + read_text(entry))
        logger.info(f"🔌 Plugin require added to {entry}")
        return True


class ConfigWriter:
    def __init__(self, filename: str = None, description: str = None):
        self.filename = filename or config.project_config_name
        self.description = description or config.project_config_description

    def build(self) -> dict:
        return {
            'description': self.description,
            'setting': {
                'urlCheck': False
            }
        }

    def write(self, main_package: Optional[str]) -> Optional[str]:
        """
        Write the devtools project config into main_package.

        Returns:
            path of the written file, None when there is no main package
        """
        if not main_package:
            logger.warning("mainPackage not found!")
            return None

        out_path = Path(main_package) / self.filename
        logger.debug(f"Write config to {self.filename}")
        write_text(out_path, json.dumps(self.build(), indent=2, ensure_ascii=False))
        return str(out_path)


__all__ = ["PluginInjector", "ConfigWriter"]
