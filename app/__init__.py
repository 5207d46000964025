from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.api.verification_router import router as verification_router
from app.config.config import Config, Credentials, load_credentials
from app.core.twilio_verify_client import TwilioVerifyClient
from app.utils.logger import setup_logging
import logging

logger = logging.getLogger(__name__)

def create_app(credentials: Optional[Credentials] = None, verify_client: Optional[TwilioVerifyClient] = None):
    setup_logging() # 로깅 설정 초기화
    if verify_client is None:
        # 환경변수가 없으면 MissingEnvironmentError로 즉시 실패
        verify_client = TwilioVerifyClient(credentials or load_credentials())

    app = FastAPI()
    app.state.verify_client = verify_client

    app.include_router(verification_router)

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Application startup event triggered. Provider timeout: {Config.TWILIO_TIMEOUT_SECONDS}s")

    @app.get("/")
    async def root():
        return {"message": "Verify Service is running"}

    return app
