from fastapi import HTTPException
from starlette import status

from attendance_api.exceptions import StoreError


def to_http_exception(e: Exception, status_code: int) -> HTTPException:
    """Maps a domain exception to the HTTP error the client sees."""
    if isinstance(e, StoreError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": e.message, "error": e.detail},
        )
    return HTTPException(status_code=status_code, detail=str(e))
