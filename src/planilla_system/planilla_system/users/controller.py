from __future__ import annotations

from flask import Flask, session

from ..common.auth import login_required, roles_required
from ..common.http import json_body, ok
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        body = json_body()
        s_user = container.auth_service.authenticate(
            str(body.get("username") or "").strip(),
            str(body.get("password") or ""),
        )

        session.clear()
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        return ok(
            {"id": s_user.user_id, "username": s_user.username, "role": s_user.role.value},
            message="Inicio de sesión exitoso",
        )

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return ok(message="Sesión cerrada")

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def me():
        return ok(users.to_dict(users.get_user(int(session["user_id"]))))

    @app.route("/api/auth/profile", methods=["PUT"], endpoint="auth_profile")
    @login_required
    def update_profile():
        body = json_body()
        user = users.update_profile(
            int(session["user_id"]),
            username=str(body.get("username") or "").strip(),
            current_password=body.get("currentPassword") or body.get("current_password"),
            new_password=body.get("newPassword") or body.get("new_password"),
        )
        session["username"] = user.username
        return ok(users.to_dict(user), message="Perfil actualizado")

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @roles_required(Role.SUPER_ADMIN)
    def list_users():
        return ok([users.to_dict(u) for u in users.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @roles_required(Role.SUPER_ADMIN)
    def create_user():
        body = json_body()
        user = users.create_user(
            username=str(body.get("username") or "").strip(),
            password=str(body.get("password") or ""),
            role=body.get("role"),
        )
        return ok(users.to_dict(user), status=201, message="Usuario creado")

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="users_get")
    @roles_required(Role.SUPER_ADMIN)
    def get_user(user_id: int):
        return ok(users.to_dict(users.get_user(user_id)))

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="users_update")
    @roles_required(Role.SUPER_ADMIN)
    def update_user(user_id: int):
        body = json_body()
        user = users.update_user(
            user_id,
            username=str(body.get("username") or "").strip(),
            role=body.get("role"),
            password=body.get("password"),
        )
        return ok(users.to_dict(user), message="Usuario actualizado")

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="users_delete")
    @roles_required(Role.SUPER_ADMIN)
    def delete_user(user_id: int):
        users.delete_user(user_id)
        return ok(message="Usuario eliminado")
