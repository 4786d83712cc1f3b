from pydantic import BaseModel, Field


class SendCodeIn(BaseModel):
    via: str = Field("sms", description="Delivery channel: 'sms' or 'email'")


class VerifyCodeIn(BaseModel):
    code: str = Field(..., min_length=1, max_length=32)
