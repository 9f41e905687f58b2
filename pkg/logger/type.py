from dataclasses import dataclass

from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console output
        colorize: Enable colored console output
        service_name: Service name stamped on every record
        show_extra: Render structured ``extra`` fields after the message
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    service_name: str = DEFAULT_SERVICE_NAME
    show_extra: bool = DEFAULT_SHOW_EXTRA

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            name = self.level.strip().upper()
            name = LEVEL_ALIASES.get(name, name)
            try:
                self.level = LogLevel(name)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                raise ValueError(
                    f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                )
        if not self.service_name:
            raise ValueError("service_name cannot be empty")


__all__ = ["LoggerConfig"]
