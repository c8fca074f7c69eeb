from attendance_api.utils.createAccessToken import create_access_token
from attendance_api.utils.decodeAccessToken import decode_token
from attendance_api.utils.passwords import hash_password, verify_password
