"""프로젝트 전역에서 재사용할 이모지 기반 로거 유틸리티."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from app.utils.config import get_settings

LEVEL_EMOJI: dict[int, str] = {
    logging.DEBUG: "🛠️",
    logging.INFO: "✅",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
}

_RESET = "\033[0m"
_BOLD = "\033[1m"
_GREY = "\033[90m"
_BLUE = "\033[94m"

LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[92m",
    logging.WARNING: "\033[93m",
    logging.ERROR: "\033[91m",
    logging.CRITICAL: "\033[95m",
}

ROOT_DIR = Path(__file__).resolve().parents[2]


class EmojiFormatter(logging.Formatter):
    """레벨별 이모지/색상을 붙여 한 줄로 출력한다."""

    def __init__(self, *, colored: bool = True, datefmt: str | None = "%H:%M:%S") -> None:
        super().__init__(datefmt=datefmt)
        self.colored = colored

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{_RESET}" if self.colored else text

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        emoji = LEVEL_EMOJI.get(record.levelno, "")
        level_color = LEVEL_COLORS.get(record.levelno, _RESET)
        level_name = self._paint(record.levelname, _BOLD + level_color)
        time_str = self._paint(self.formatTime(record, self.datefmt), _GREY)
        logger_name = self._paint(record.name, _BLUE)
        formatted = f"{emoji} [{level_name}] {time_str} {logger_name} - {record.getMessage()}"
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


def _file_handler(log_dir: str) -> logging.FileHandler:
    """날짜별 로그 파일 핸들러를 만든다 (파일에는 색상 코드 제외)."""

    directory = Path(log_dir)
    if not directory.is_absolute():
        directory = ROOT_DIR / directory
    directory.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(directory / f"{date.today().isoformat()}.log", encoding="utf-8")
    handler.setFormatter(EmojiFormatter(colored=False))
    return handler


def get_logger(name: str) -> logging.Logger:
    """설정된 레벨로 표준 출력(옵션: 파일)에 기록하는 로거를 반환한다."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    settings = get_settings()
    logger.setLevel(settings.log_level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(EmojiFormatter())
    logger.addHandler(console_handler)

    if settings.log_to_file:
        logger.addHandler(_file_handler(settings.log_dir))

    logger.propagate = False
    return logger


__all__ = ["EmojiFormatter", "get_logger"]
