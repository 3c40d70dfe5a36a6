from typing import Any

from loguru import logger


class AuthexLogger:
    def __init__(self, name: str = "authex") -> None:
        self.name = name
        self.logger = logger.opt(colors=True, lazy=True, depth=1)

    def _parse_msg(self, message: str) -> str:
        return f"<m>[{self.name}]</m> {message}"

    def banner(self, level: str, *lines: str) -> None:
        """Log a block of lines framed by separator rules."""
        rule = "=" * 50
        for line in (rule, *lines, rule):
            self.logger.log(level, self._parse_msg(line))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(self._parse_msg(message), *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.info(self._parse_msg(message), *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(self._parse_msg(message), *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.error(self._parse_msg(message), *args, **kwargs)

    def success(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.success(self._parse_msg(message), *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.critical(self._parse_msg(message), *args, **kwargs)
