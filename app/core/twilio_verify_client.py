import asyncio
import httpx
import logging
from typing import Dict, Optional
from app.config.config import Config, Credentials

logger = logging.getLogger(__name__)

PHONE_VERIFICATION_REQUEST_PATH = "/Verifications"
PHONE_VERIFICATION_CHECK_PATH = "/VerificationCheck"


class ProviderError(Exception):
    pass


class ProviderURLError(ProviderError):
    pass


class ProviderTimeoutError(ProviderError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"provider call exceeded {timeout}s")


class ProviderStatusError(ProviderError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"got wrong status code: {status_code}")


class TwilioVerifyClient:
    """
    Twilio Verify API 호출 클라이언트.
    요청마다 한 번만 호출하며 재시도하지 않습니다.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = Config.TWILIO_BASE_URL,
        timeout: float = Config.TWILIO_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = credentials
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def method_url(self, path: str, params: Optional[Dict[str, str]] = None) -> httpx.URL:
        try:
            return httpx.URL(self.base_url.format(service_sid=self.credentials.service_sid) + path, params=params)
        except httpx.InvalidURL as e:
            raise ProviderURLError(str(e)) from e

    async def do_request(self, method: str, url: httpx.URL) -> bytes:
        """
        URL의 쿼리 문자열을 form 본문으로 보내고 2xx 응답의 본문을 그대로 반환합니다.
        네트워크 오류(httpx.RequestError)는 그대로 전파되고, 전체 호출이 timeout을 넘기면 ProviderTimeoutError가 발생합니다.
        """
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            # httpx 타임아웃은 단계별로 적용되므로 호출 전체를 한 번 더 제한함
            try:
                response = await asyncio.wait_for(
                    client.request(
                        method,
                        url,
                        content=url.query,
                        headers=headers,
                        auth=(self.credentials.account_sid, self.credentials.auth_token),
                    ),
                    self.timeout,
                )
            except asyncio.TimeoutError:
                logger.error(f"Twilio call to {url.path} exceeded {self.timeout}s")
                raise ProviderTimeoutError(self.timeout)

        if not 200 <= response.status_code < 300:
            logger.error(f"Twilio returned {response.status_code} for {url.path}: {response.text[:300]}")
            raise ProviderStatusError(response.status_code)
        return response.content

    async def request_code(self, to: str, channel: str) -> bytes:
        url = self.method_url(PHONE_VERIFICATION_REQUEST_PATH, {"To": to, "Channel": channel})
        return await self.do_request("POST", url)

    async def check_code(self, to: str, code: str) -> bytes:
        url = self.method_url(PHONE_VERIFICATION_CHECK_PATH, {"To": to, "Code": code})
        return await self.do_request("POST", url)
