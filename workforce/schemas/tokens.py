# workforce/schemas/tokens.py
from pydantic import BaseModel
from workforce.schemas.user import UserOut


class AuthResult(BaseModel):
    user: UserOut
    token: str
