"""Pydantic schemas for the contact form."""
from pydantic import BaseModel, EmailStr, Field


class ContactRequest(BaseModel):
    """Contact form submission; every field is checked on its own."""

    name: str = Field(
        ...,
        min_length=2,
        description="Sender name",
    )
    email: EmailStr = Field(..., description="Sender e-mail address")
    phone: str = Field(
        ...,
        min_length=10,
        description="Sender phone number",
    )
    message: str = Field(
        ...,
        min_length=10,
        description="Message body",
    )


class ContactResponse(BaseModel):
    status: str = Field(..., description="Submission status")
    title: str = Field(..., description="Notification title")
    description: str = Field(..., description="Notification text")
