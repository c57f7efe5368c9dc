"""로깅 설정: 앱 시작 시 한 번 호출"""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """루트 로거 설정. debug=True면 level 무시하고 DEBUG.

    알 수 없는 레벨 이름은 INFO로 처리.
    """
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    # uvicorn 접근 로그는 DEBUG에서만
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if resolved <= logging.DEBUG else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
