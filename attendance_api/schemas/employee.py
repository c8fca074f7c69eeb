from pydantic import BaseModel


class RegisterResponse(BaseModel):
    message: str
    employee_id: str
    photo_url: str | None = None


class PhotoResponse(BaseModel):
    message: str
    photo_url: str
