from pydantic import BaseModel, EmailStr, field_validator, model_validator
from typing import Optional

from app.core.config import settings


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    password_confirmation: Optional[str] = None
    role: str = "member"

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v):
        if not settings.PASSWORD_MIN_LENGTH <= len(v) <= settings.PASSWORD_MAX_LENGTH:
            raise ValueError(
                f"Password must be between {settings.PASSWORD_MIN_LENGTH} "
                f"and {settings.PASSWORD_MAX_LENGTH} characters"
            )
        return v

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        if v not in ("member", "admin"):
            raise ValueError("Role must be member or admin")
        return v

    @model_validator(mode="after")
    def check_confirmation(self):
        if self.password_confirmation is not None and self.password_confirmation != self.password:
            raise ValueError("Password confirmation doesn't match Password")
        return self
