"""
logging_config.py

애플리케이션 로깅 설정 파일.

root 로거에 콘솔 핸들러(및 선택적으로 파일 핸들러)를 붙인다.
포맷: 시각 [레벨] 로거명: 메시지

설계 원칙:
- 로깅 설정은 프로세스당 한 번만 수행
  (테스트에서 create_app이 여러 번 호출되어도 핸들러 중복 없음)
- 각 모듈은 logging.getLogger(__name__)만 사용

"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
