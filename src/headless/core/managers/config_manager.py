# src/headless/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from headless.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Process-wide access to the session defaults in the packaged settings.json
    (request timeout, redirect limit, cookie handling, User-Agent version).
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._settings = {}
            cls._instance.reset()
        return cls._instance

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Looks up a dotted key such as 'session.max_redirects'.
        Missing keys, and keys that run through a non-mapping value, give `default`.
        """
        node: Any = self._settings
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def reset(self) -> None:
        """(Re)reads settings.json; an absent or unreadable file leaves the settings empty."""
        settings_path = PathUtils.get_settings_file()
        self._settings: Dict[str, Any] = {}

        if not settings_path.exists():
            logger.warning("settings.json not found at %s. Falling back to built-in defaults.", settings_path)
            return

        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                self._settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", settings_path, e, exc_info=True)
            return

        logger.debug("Session settings loaded from %s.", settings_path)


config_manager = ConfigManager()
