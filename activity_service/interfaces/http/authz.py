from fastapi import Depends
from fastapi.security import APIKeyHeader

from ...domain.entities import Role, TokenClaims
from ...domain.errors import Forbidden, InvalidTokenError, Unauthenticated
from ...infrastructure.security import TokenCodec, get_token_codec

# Raw header: any scheme is accepted, the token is whatever follows it.
authorization = APIKeyHeader(name="Authorization", auto_error=False)

def extract_token(header: str | None) -> str:
    parts = (header or "").split(" ")
    return parts[1] if len(parts) > 1 else ""

def get_claims(
    header: str | None = Depends(authorization),
    codec: TokenCodec = Depends(get_token_codec),
) -> TokenClaims:
    token = extract_token(header)
    if not token:
        raise Unauthenticated("Access denied: token not found")
    try:
        return codec.verify(token)
    except InvalidTokenError:
        raise Forbidden("Access denied: invalid token")

def require_role(role: Role):
    def _require(claims: TokenClaims = Depends(get_claims)) -> TokenClaims:
        if claims.role != role:
            raise Forbidden(f"Access forbidden: only {role.value} may access this resource")
        return claims
    return _require

require_admin = require_role(Role.ADMIN)
require_student = require_role(Role.STUDENT)
