import httpx
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from app.core.twilio_verify_client import ProviderError, TwilioVerifyClient
from app.schemas.verification_schemas import CheckCodeRequest, RequestCodeRequest, VerificationResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Verification"]
)

def get_verify_client(request: Request) -> TwilioVerifyClient:
    return request.app.state.verify_client

def _error_text(e: Exception) -> str:
    return str(e) or e.__class__.__name__

async def _call_provider(call, *args) -> VerificationResponse:
    try:
        data = await call(*args)
    except (ProviderError, httpx.RequestError) as e:
        logger.error(f"Twilio request failed: {_error_text(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_error_text(e))

    try:
        return VerificationResponse.model_validate_json(data)
    except ValidationError as e:
        logger.error(f"Could not decode Twilio response: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.post("/request", response_model=VerificationResponse)
async def request_code(request: Request, client: TwilioVerifyClient = Depends(get_verify_client)):
    """전화번호로 인증 코드 발송을 요청합니다."""
    try:
        payload = RequestCodeRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Malformed /request payload: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response = await _call_provider(client.request_code, payload.to, payload.channel)
    logger.info(f"Verification {response.sid} requested via {response.channel}: {response.status}")
    return response

@router.post("/verify", response_model=VerificationResponse)
async def verify_code(request: Request, client: TwilioVerifyClient = Depends(get_verify_client)):
    """제출된 인증 코드를 검증합니다. 코드가 틀리면 406을 반환합니다."""
    try:
        payload = CheckCodeRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Malformed /verify payload: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response = await _call_provider(client.check_code, payload.to, payload.code)
    if not response.valid:
        logger.info(f"Verification {response.sid} rejected: {response.status}")
        raise HTTPException(status_code=status.HTTP_406_NOT_ACCEPTABLE, detail="not valid")
    logger.info(f"Verification {response.sid} approved")
    return response
