# src/merchants_guide/config.py
import logging
import os


class AppConfig:
    """Centralized configuration for the application."""
    PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
    GRAMMAR_FILE = os.path.join("domains", "galactic", "grammar.lark")
    INPUT_ENCODING = "utf-8"
    UNKNOWN_QUERY_ANSWER = "I have no idea what you are talking about"
    LOG_LEVEL = os.getenv("MERCHANTS_GUIDE_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"

    @staticmethod
    def get_grammar_path(grammar_file: str = None) -> str:
        """Constructs the full path to a grammar file shipped with the package."""
        return os.path.join(AppConfig.PACKAGE_ROOT, grammar_file or AppConfig.GRAMMAR_FILE)

    @staticmethod
    def get_log_level(debug: bool = False) -> int:
        if debug:
            return logging.DEBUG
        level = logging.getLevelName(AppConfig.LOG_LEVEL)
        # unknown names come back as the string "Level <name>"
        return level if isinstance(level, int) else logging.WARNING
