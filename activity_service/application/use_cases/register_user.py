import structlog

from ...domain.entities import Role, User
from ...domain.errors import ConflictError, ValidationError

logger = structlog.get_logger()


class IUserRepository:
    def get_by_username(self, username: str) -> User | None: ...
    def find_by_credentials(self, username: str, password: str) -> User | None: ...
    def create(self, username: str, password: str, role: Role) -> User: ...


class RegisterUser:
    def __init__(self, repo: IUserRepository):
        self.repo = repo

    def execute(self, username: str | None, password: str | None, role: str | None) -> User:
        if not username or not password or not role:
            raise ValidationError("username, password and role are required")
        try:
            role = Role(role)
        except ValueError:
            allowed = ", ".join(r.value for r in Role)
            raise ValidationError(f"role must be one of: {allowed}")
        if self.repo.get_by_username(username):
            raise ConflictError("Username already taken")
        user = self.repo.create(username, password, role)
        logger.info("user_registered", user_id=user.id, username=user.username, role=user.role.value)
        return user
