from typing import Optional

from pydantic import BaseModel, Field

# Missing credentials are rejected by crud with a 400, not by validation.

class RegisterIn(BaseModel):
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)

class LoginIn(BaseModel):
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)

class AuthOut(BaseModel):
    success: bool = True
    userId: int
