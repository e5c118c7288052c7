from pydantic import BaseModel, EmailStr, field_validator, model_validator

MIN_PASSWORD_LENGTH = 8


# ─── Requests ─────────────────────────────────────────────────────────────────
class LoginRequest(BaseModel):
    email:    EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class ChangePasswordRequest(BaseModel):
    currentPassword: str
    newPassword:     str
    confirmPassword: str

    @field_validator("newPassword")
    @classmethod
    def long_enough(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v

    @model_validator(mode="after")
    def check_pair(self) -> "ChangePasswordRequest":
        if self.newPassword != self.confirmPassword:
            raise ValueError("Passwords do not match")
        if self.newPassword == self.currentPassword:
            raise ValueError("New password must differ from the current one")
        return self


# ─── Responses ────────────────────────────────────────────────────────────────
class UserInToken(BaseModel):
    id:    str
    email: str
    name:  str | None = None
    role:  str


class LoginResponse(BaseModel):
    accessToken: str
    tokenType:   str = "Bearer"
    expiresIn:   int          # seconds
    user:        UserInToken
