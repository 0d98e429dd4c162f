"""Logging configuration."""

import logging
import sys

# 요청마다 INFO 로그를 남기는 라이브러리
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore")


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 stdout으로 설정합니다.

    Args:
        level: 로그 레벨 이름 (알 수 없는 값은 INFO)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
