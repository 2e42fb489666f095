from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_no_whitespace, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role


def _parse_role(value: object) -> Role:
    try:
        return Role(str(value))
    except ValueError:
        raise ValidationError("Rol no válido")


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


def _require_username(username: str) -> str:
    username = require_non_empty(username, "Usuario")
    return require_no_whitespace(username, "El usuario")


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not username or not password:
            raise ValidationError("Usuario y contraseña son requeridos")
        require_no_whitespace(username, "El nombre de usuario")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            logger.warning("failed login for %r", username)
            raise AuthenticationError("Credenciales inválidas")

        if not _password_matches(user.password_hash, password):
            logger.warning("failed login for %r", username)
            raise AuthenticationError("Credenciales inválidas")

        logger.info("login user=%s role=%s", user.user_id, user.role.value)
        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class UserService:
    """Use case: manage users (super admin) and the caller's own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.list_active()

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user

    def _ensure_unique_username(self, username: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self._users.get_by_username(username)
        if existing and existing.user_id != exclude_id:
            raise ConflictError("Ya existe un usuario con este nombre")

    def create_user(self, *, username: str, password: str, role: object) -> User:
        if not username or not password or not role:
            raise ValidationError("Usuario, contraseña y rol son obligatorios")

        username = _require_username(username)
        role_v = _parse_role(role)
        require_min_length(password, "La contraseña", MIN_PASSWORD_LENGTH)
        self._ensure_unique_username(username)

        user_id = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            role=role_v,
        )
        logger.info("user created id=%s role=%s", user_id, role_v.value)
        return self.get_user(user_id)

    def update_user(self, user_id: int, *, username: str, role: object, password: Optional[str] = None) -> User:
        current = self.get_user(user_id)
        if current.role == Role.SUPER_ADMIN:
            raise ValidationError("No se puede modificar un Super Administrador")

        if not username or not role:
            raise ValidationError("Usuario y rol son obligatorios")

        username = _require_username(username)
        role_v = _parse_role(role)
        self._ensure_unique_username(username, exclude_id=current.user_id)

        password_hash = None
        if password and password.strip():
            require_min_length(password, "La contraseña", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        self._users.update_user(
            user_id=current.user_id,
            username=username,
            role=role_v,
            password_hash=password_hash,
        )
        logger.info("user updated id=%s", current.user_id)
        return self.get_user(current.user_id)

    def delete_user(self, user_id: int) -> None:
        current = self.get_user(user_id)
        if current.role == Role.SUPER_ADMIN:
            raise ValidationError("No se puede eliminar un Super Administrador")

        if not self._users.set_active(current.user_id, is_active=False):
            raise NotFoundError("Usuario no encontrado")
        logger.info("user removed id=%s", current.user_id)

    def update_profile(
        self,
        user_id: int,
        *,
        username: str,
        current_password: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> User:
        user = self.get_user(user_id)
        username = _require_username(username)
        self._ensure_unique_username(username, exclude_id=user.user_id)

        password_hash = None
        if new_password and new_password.strip():
            if not current_password:
                raise ValidationError("La contraseña actual es requerida para cambiar la contraseña")
            if not _password_matches(user.password_hash, current_password):
                raise ValidationError("La contraseña actual es incorrecta")
            require_min_length(new_password, "La nueva contraseña", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(new_password)

        self._users.update_user(
            user_id=user.user_id,
            username=username,
            role=user.role,
            password_hash=password_hash,
        )
        return self.get_user(user.user_id)

    @staticmethod
    def to_dict(user: User) -> dict:
        return {
            "id": user.user_id,
            "username": user.username,
            "role": user.role.value,
            "is_active": user.is_active,
            "created_at": user.created_at.isoformat() if user.created_at else None,
            "updated_at": user.updated_at.isoformat() if user.updated_at else None,
        }
