import structlog

from ...domain.entities import User
from ...domain.errors import Unauthenticated
from .register_user import IUserRepository

logger = structlog.get_logger()


class ITokenIssuer:
    def issue(self, user: User) -> str: ...


class LoginUser:
    def __init__(self, repo: IUserRepository, tokens: ITokenIssuer):
        self.repo = repo
        self.tokens = tokens

    def execute(self, username: str | None, password: str | None) -> str:
        user = None
        if username and password:
            user = self.repo.find_by_credentials(username, password)
        if user is None:
            # same message for unknown user and wrong password
            logger.info("login_failed", username=username)
            raise Unauthenticated("Invalid username or password")
        return self.tokens.issue(user)
