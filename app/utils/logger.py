import logging
import sys
from app.config.config import Config

def setup_logging():
    logging.basicConfig(
        level=Config.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger("uvicorn").propagate = False
    logging.getLogger("uvicorn.access").propagate = False
    logging.getLogger("uvicorn.error").propagate = False
    # httpx가 요청 URL(전화번호 포함)을 INFO로 남기지 않도록 함
    logging.getLogger("httpx").setLevel(logging.WARNING)
