from pydantic import AliasChoices, BaseModel, EmailStr, Field, StrictStr, field_validator

from app.config import settings
from app.core.hashing import BCRYPT_MAX_BYTES, password_fits


class UserCreate(BaseModel):
    email: EmailStr
    password: StrictStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )
        if not password_fits(value):
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    email: EmailStr
    password: StrictStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UserOut(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    email: str

    model_config = {
        "from_attributes": True
    }
