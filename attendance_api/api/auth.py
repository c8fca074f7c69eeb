from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.security import APIKeyHeader
from starlette import status

from sqlalchemy.orm import Session
from attendance_api.api.errors import to_http_exception
from attendance_api.database.session import get_db
from attendance_api.exceptions import (
    ConflictError,
    InvalidCredentials,
    NotFound,
    StoreError,
    Unauthorized,
    ValidationError,
)
from attendance_api.schemas.accessToken import LoginRequest, LoginResponse
from attendance_api.schemas.employee import PhotoResponse, RegisterResponse
from attendance_api.services import auth as auth_service
from attendance_api.utils.photoStorage import (
    photo_url,
    remove_photo,
    store_photo,
    validate_photo,
)


router = APIRouter(tags=["auth"])

# The token is sent as-is or as "Bearer <token>"
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


db_dependency = Annotated[Session, Depends(get_db)]


def get_current_user(token: str | None = Depends(authorization_header)):
    try:
        return auth_service.authenticate(token)
    except Unauthorized:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Could not validate user.",
        )


user_dependency = Annotated[dict, Depends(get_current_user)]


def _save_upload(owner: str, photo: UploadFile | None):
    if photo is None or not photo.filename:
        return None
    try:
        extension, content = validate_photo(photo)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return store_photo(owner, extension, content)


# --------------------------------------------------------------------------------------
@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
def register(
    db: db_dependency,
    username: Annotated[str, Form(min_length=1, max_length=60)],
    password: Annotated[str, Form(min_length=1)],
    employee_id: Annotated[str, Form(min_length=1, max_length=50)],
    full_name: Annotated[str, Form(min_length=1, max_length=100)],
    department: Annotated[str, Form(min_length=1, max_length=100)],
    photo: Annotated[UploadFile | None, File()] = None,
):
    """Registers an employee account, with an optional profile photo."""
    photo_reference = _save_upload(employee_id, photo)

    try:
        employee = auth_service.register(
            db,
            username=username,
            password=password,
            employee_id=employee_id,
            full_name=full_name,
            department=department,
            photo_reference=photo_reference,
        )
    except (ConflictError, StoreError) as e:
        remove_photo(photo_reference)
        raise to_http_exception(e, status.HTTP_400_BAD_REQUEST)
    except Exception:
        remove_photo(photo_reference)
        raise

    return {
        "message": "User registered successfully",
        "employee_id": employee.employee_id,
        "photo_url": photo_url(employee.photo_reference),
    }


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: db_dependency):
    try:
        return auth_service.login(db, credentials.username, credentials.password)
    except (InvalidCredentials, StoreError) as e:
        raise to_http_exception(e, status.HTTP_400_BAD_REQUEST)


@router.put("/photo", response_model=PhotoResponse)
def update_photo(
    photo: Annotated[UploadFile, File()], db: db_dependency, user: user_dependency
):
    """Replaces the profile photo of the logged in employee."""
    new_reference = _save_upload(user["username"], photo)
    if new_reference is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="No image uploaded"
        )

    try:
        previous_reference = auth_service.update_photo(
            db, user["username"], new_reference
        )
    except NotFound as e:
        remove_photo(new_reference)
        raise to_http_exception(e, status.HTTP_404_NOT_FOUND)
    except StoreError as e:
        remove_photo(new_reference)
        raise to_http_exception(e, status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception:
        remove_photo(new_reference)
        raise

    remove_photo(previous_reference)
    return {"message": "Photo updated successfully", "photo_url": photo_url(new_reference)}
