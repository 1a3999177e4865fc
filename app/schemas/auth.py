from pydantic import BaseModel, EmailStr, Field


# Schema for user registration
class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

# Schema for user login
class UserLogin(BaseModel):
    email: EmailStr
    password: str


class LoginResult(BaseModel):
    id: int
    email: str


# Schema for login response
class LoginResponse(BaseModel):
    result: LoginResult
    token: str


class MessageResponse(BaseModel):
    message: str
