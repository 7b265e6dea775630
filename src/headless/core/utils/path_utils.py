# src/headless/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the paths the package depends on.
    """

    @staticmethod
    def get_package_root() -> Path:
        """
        Returns the absolute path of the 'headless' package directory.
        Works both from a source checkout and from an installed distribution.
        """
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"
