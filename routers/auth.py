from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from config import settings

# Cookie jo login ke baad set hoti hai: "admin_access" ya "<role>_<user id>"
AUTH_COOKIE = "user_token"
KNOWN_ROLES = ("admin", "accountant", "teacher", "parent", "student")


class NotAuthenticated(Exception):
    """No usable session on the request (rendered as 401 in main.py)."""


@dataclass(frozen=True)
class Caller:
    user_id: str
    role: str


def caller_from_token(token: Optional[str]) -> Optional[Caller]:
    if not token:
        return None
    if token == settings.ADMIN_TOKEN:
        return Caller(user_id="admin", role="admin")

    # "student_user_2abc" -> role "student", id "user_2abc"
    role, sep, user_id = token.partition("_")
    if not sep or not user_id or role not in KNOWN_ROLES:
        return None
    return Caller(user_id=user_id, role=role)


# --- DEPENDENCY: logged-in user ---
def get_caller(request: Request) -> Caller:
    caller = caller_from_token(request.cookies.get(AUTH_COOKIE))
    if caller is None:
        raise NotAuthenticated()
    return caller
