import logging
import sys
import uvicorn
from app import create_app
from app.config.config import Config, MissingEnvironmentError

logger = logging.getLogger(__name__)

try:
    app = create_app()
except MissingEnvironmentError as e:
    logger.critical(f"Cannot start: {e}")
    sys.exit(1)

if __name__ == '__main__':
    logger.info(f"Start listening on {Config.SERVICE_HOST}:{Config.SERVICE_PORT}")
    uvicorn.run(
        app,
        host=Config.SERVICE_HOST,
        port=Config.SERVICE_PORT,
        timeout_keep_alive=Config.SERVER_TIMEOUT_SECONDS,
        log_config=None # logging.basicConfig를 사용하므로 Uvicorn의 기본 로깅 설정을 비활성화
    )
