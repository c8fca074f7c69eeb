from jose import jwt, JWTError

from attendance_api.config import SECRET_KEY, ALGORITHM
from attendance_api.exceptions import Unauthorized


def decode_token(token: str | None):
    if not token:
        raise Unauthorized("Missing token")

    # Accept both "Bearer <token>" and the bare token
    scheme, _, credentials = token.partition(" ")
    if credentials and scheme.lower() == "bearer":
        token = credentials.strip()

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise Unauthorized(f"Could not validate token: {e}")

    username = payload.get("sub")
    if not username:
        raise Unauthorized("Token does not identify a user")

    return {"username": username}
