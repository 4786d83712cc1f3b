from typing import Literal

from pydantic import BaseModel, Field


class AcceptedOut(BaseModel):
    status: Literal["accepted"] = "accepted"


class OkOut(BaseModel):
    status: Literal["ok"] = "ok"


class ProvisioningUriOut(BaseModel):
    uri: str = Field(..., description="otpauth:// URI for authenticator enrollment")
