import logging

from .config import DEFAULT_LOGGER_CONFIG, LoggerConfig, resolve_config


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])
        self.set_configuration()

    def set_configuration(self):
        if not self.config["is_enabled"]:
            self.logger.disabled = True
            return

        self.logger.disabled = False
        self.logger.setLevel(self.config["level"])
        # the same named logger is shared by every parser instance
        if any(getattr(handler, "_yini_handler", False) for handler in self.logger.handlers):
            return
        self.formatter = logging.Formatter(self.config["format"])
        self.ch = logging.StreamHandler()
        self.ch.setFormatter(self.formatter)
        self.ch._yini_handler = True  # type: ignore[attr-defined]
        self.logger.addHandler(self.ch)


def get_logger(name: str, enabled: bool) -> logging.Logger:
    return Logger(config={"name": name, "is_enabled": enabled}).logger
