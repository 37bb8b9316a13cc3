from pydantic import BaseModel, Field


class SetAdminRoleRequest(BaseModel):
    uid: str = Field(..., min_length=1)

    class Config:
        extra = "ignore"


class SendOtpEmailRequest(BaseModel):
    # Presence only; no email or code format rules
    email: str = Field(..., min_length=1)
    otp: str = Field(..., min_length=1)

    class Config:
        extra = "ignore"
        # Clients may send the code as a number
        coerce_numbers_to_str = True
