"""
wxunpack Configuration
Single source of truth for all settings.
Load once at startup, pass to all components.
"""
import copy
import json
from pathlib import Path
from .utils.logger import logger


CONFIG_FILENAME = 'wxunpack.config.json'

# Default config values
DEFAULTS = {
    "discovery": {
        "archive_ext": "wxapkg",
        "filterable_framework": True,
        # Bundled runtime archives, ~15MB, never part of the app itself
        "framework_names": ["WeChatAppExService", "WAService"]
    },
    "unpack": {
        "clean_old": True,
        "decoder": None  # "module:callable", None = must be passed explicitly
    },
    "plugin": {
        "entry_script": "game.js",
        "require_line": 'require("./plugin");\n'
    },
    "project_config": {
        "filename": "project.private.config.json",
        "description": "See https://developers.weixin.qq.com/miniprogram/dev/devtools/projectconfig.html"
    }
}


class UnpackConfig:
    def __init__(self, config_path: str = None):
        self._config = self._deep_copy(DEFAULTS)

        if config_path:
            self.config_path = Path(config_path)
        else:
            # Looked up in the directory the tool is run from
            self.config_path = Path.cwd() / CONFIG_FILENAME

        if self.config_path.exists():
            self._load()
        else:
            logger.debug(f"No config file found at {self.config_path} — using defaults")

    def _load(self):
        """Load and merge config file over defaults"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
            self._deep_merge(self._config, user_config)
            logger.debug(f"Loaded config from {self.config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file: {e} — using defaults")
        except OSError as e:
            logger.error(f"Failed to load config: {e} — using defaults")

    def get(self, *keys, default=None):
        """
        Get a nested config value by key path.
        e.g. config.get('discovery', 'archive_ext')
        """
        value = self._config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    # ── Convenience properties ─────────────────────────────────────────────

    @property
    def archive_ext(self) -> str:
        return self.get('discovery', 'archive_ext', default='wxapkg')

    @property
    def filterable_framework(self) -> bool:
        return self.get('discovery', 'filterable_framework', default=True)

    @property
    def framework_names(self) -> list:
        return self.get('discovery', 'framework_names', default=[])

    @property
    def clean_old(self) -> bool:
        return self.get('unpack', 'clean_old', default=True)

    @property
    def decoder(self):
        return self.get('unpack', 'decoder', default=None)

    @property
    def entry_script(self) -> str:
        return self.get('plugin', 'entry_script', default='game.js')

    @property
    def plugin_require(self) -> str:
        return self.get('plugin', 'require_line', default='require("./plugin");\n')

    @property
    def project_config_name(self) -> str:
        return self.get('project_config', 'filename', default='project.private.config.json')

    @property
    def project_config_description(self) -> str:
        return self.get('project_config', 'description', default='')

    # ── Helpers ────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_copy(d: dict) -> dict:
        return copy.deepcopy(d)

    @staticmethod
    def _deep_merge(base: dict, override: dict):
        """Merge override into base recursively — modifies base in place"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                UnpackConfig._deep_merge(base[key], value)
            else:
                base[key] = value


# Singleton — import this everywhere
config = UnpackConfig()

__all__ = ["UnpackConfig", "config", "DEFAULTS", "CONFIG_FILENAME"]
