from datetime import datetime, timedelta, timezone
from jose import jwt

from attendance_api.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS


def create_access_token(
    username: str,
    expires_delta: timedelta = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS),
):
    issued_at = datetime.now(timezone.utc)
    data_to_encode = {
        "sub": username,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(data_to_encode, SECRET_KEY, algorithm=ALGORITHM)
