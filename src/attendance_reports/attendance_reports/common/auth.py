from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role

FORBIDDEN_MESSAGE = "You don't have permission to view this page"


def role_required(role: Role):
    """Gate a view on the role stored in the session.

    Login itself lives elsewhere; this only reads ``user_id``/``role``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session or not session.get("company_id"):
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401

            if session.get("role") != role.value:
                return jsonify({"success": False, "message": FORBIDDEN_MESSAGE}), 403

            return view(*args, **kwargs)

        return wrapper

    return decorator
