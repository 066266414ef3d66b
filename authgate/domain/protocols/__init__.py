"""Domain protocols (ports).

Infrastructure adapters implement these by structural typing; nothing
inherits from them.
"""

from authgate.domain.protocols.cache_protocol import CacheProtocol
from authgate.domain.protocols.credential_store_protocol import (
    CredentialStoreProtocol,
)
from authgate.domain.protocols.logger_protocol import LoggerProtocol
from authgate.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from authgate.domain.protocols.token_codec_protocol import TokenCodecProtocol
from authgate.domain.protocols.user_repository import UserRepository

__all__ = [
    "CacheProtocol",
    "CredentialStoreProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenCodecProtocol",
    "UserRepository",
]
