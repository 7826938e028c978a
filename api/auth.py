import logging
from functools import wraps

from flask import g, jsonify, session

from api.models import UserId

logger = logging.getLogger(__name__)


class SessionUser:
    __slots__ = ("id",)

    def __init__(self, user_id: UserId):
        self.id = user_id


def current_user() -> SessionUser | None:
    """Resolve the caller from the signed session cookie.

    The login flow that writes ``session["uid"]`` lives outside this service.
    """
    uid = session.get("uid")
    if uid is None or uid == "":
        return None
    return SessionUser(UserId(uid))


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user = current_user()
        if user is None:
            logger.warning("Rejected unauthenticated request")
            return jsonify(message="Unauthorized"), 401
        g.user = user
        return f(*args, **kwargs)

    return decorated_function
