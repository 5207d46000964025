import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

REQUIRED_ENV_KEYS = ("TWILIO_SERVICE_SID", "TWILIO_ACCOUNT_SID", "TWILIO_TOKEN")

class Config:
    TWILIO_BASE_URL = os.getenv("TWILIO_BASE_URL", "https://verify.twilio.com/v2/Services/{service_sid}")
    TWILIO_TIMEOUT_SECONDS = float(os.getenv("TWILIO_TIMEOUT_SECONDS", "5"))
    SERVICE_HOST = os.getenv("SERVICE_HOST", "0.0.0.0")
    SERVICE_PORT = int(os.getenv("SERVICE_PORT", "8080"))
    # uvicorn은 read/write 타임아웃을 따로 두지 않으므로 keep-alive 타임아웃으로 대신함
    SERVER_TIMEOUT_SECONDS = int(os.getenv("SERVER_TIMEOUT_SECONDS", "15"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class MissingEnvironmentError(Exception):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"[{key}] is not present")


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_sid: str
    account_sid: str
    auth_token: str


def env_lookup(*keys: str) -> dict:
    """Return the values of the given environment variables.

    An empty value counts as present; the first absent key raises
    MissingEnvironmentError.
    """
    envs = {}
    for key in keys:
        value = os.environ.get(key)
        if value is None:
            raise MissingEnvironmentError(key)
        envs[key] = value
    return envs


def load_credentials() -> Credentials:
    envs = env_lookup(*REQUIRED_ENV_KEYS)
    return Credentials(
        service_sid=envs["TWILIO_SERVICE_SID"],
        account_sid=envs["TWILIO_ACCOUNT_SID"],
        auth_token=envs["TWILIO_TOKEN"],
    )
