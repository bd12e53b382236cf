"""
Pydantic schemas for the contact form
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class ContactSubmission(BaseModel):
    name: str = Field(..., max_length=200)
    email: str = Field(..., max_length=320)
    message: str = Field(..., max_length=5000)

    @field_validator("name", "email", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def looks_like_email(cls, value: str) -> str:
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            raise ValueError("must be a valid email address")
        return value


class ContactResult(BaseModel):
    success: bool
    error: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool
    message: str
