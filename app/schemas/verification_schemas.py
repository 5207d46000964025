from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ValidationInfo, field_validator, model_validator

class ZeroValueModel(BaseModel):
    """
    null 필드나 null 본문은 기본값(빈 문자열, False)으로 채우고,
    키는 대소문자 구분 없이 필드에 매칭합니다.
    """

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        by_lower = {name.lower(): name for name in cls.model_fields}
        matched = {}
        for key, value in data.items():
            name = key if key in cls.model_fields else by_lower.get(key.lower())
            if name is not None:
                matched[name] = value
        return matched

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

# 인증번호 발송 요청
class RequestCodeRequest(ZeroValueModel):
    to: str = ""
    channel: str = ""

# 인증번호 확인 요청
class CheckCodeRequest(ZeroValueModel):
    to: str = ""
    code: str = ""

class VerificationResponse(ZeroValueModel):
    """Twilio Verify verification object, field for field."""
    sid: str = ""
    service_sid: str = ""
    account_sid: str = ""
    to: str = ""
    channel: str = ""
    status: str = ""
    valid: bool = False
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
