"""Config API module."""

from .CodefigConfig import CodefigConfig
from .HighlightConfig import HighlightConfig
from .LogConfig import LogConfig

__all__ = ["CodefigConfig", "HighlightConfig", "LogConfig"]
