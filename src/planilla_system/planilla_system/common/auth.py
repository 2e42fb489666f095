from __future__ import annotations

from functools import wraps

from flask import session

from ..core.enums import Role
from .http import fail

ADMIN_OR_SCANNER = (Role.SUPER_ADMIN, Role.ADMIN, Role.SCANNER)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Debe iniciar sesión", status=401, code="UNAUTHORIZED")
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return fail("Debe iniciar sesión", status=401, code="UNAUTHORIZED")
            if session.get("role") not in allowed:
                return fail("Permisos insuficientes", status=403, code="FORBIDDEN")
            return view(*args, **kwargs)

        return wrapper

    return decorator
