from .password_hashing import WerkzeugPasswordHasher
from .token_issuer import JwtTokenIssuer, utc_now

__all__ = ["JwtTokenIssuer", "WerkzeugPasswordHasher", "utc_now"]
