"""Composition root.

Builds every collaborator once from an explicit Settings instance. The
application factory stores the resulting Container on `app.state.container`;
request handlers reach it through the `get_container` dependency. There are
no module-level singletons.

Usage:
    settings = Settings()
    container = build_container(settings)
    result = await container.engine.sign_in(SignIn(login=..., password=...))
    await container.aclose()
"""

from dataclasses import dataclass

from redis.asyncio import ConnectionPool, Redis

from authgate.application.services import AccessGuard, SessionEngine, UserDirectory
from authgate.core.config import Settings
from authgate.domain.protocols import (
    CredentialStoreProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenCodecProtocol,
    UserRepository,
)
from authgate.infrastructure.cache import CacheKeys, RedisAdapter, RedisCredentialStore
from authgate.infrastructure.logging import ConsoleAdapter
from authgate.infrastructure.persistence import InMemoryUserRepository
from authgate.infrastructure.security import BcryptPasswordService, JWTService


@dataclass
class Container:
    """Wired application services.

    Attributes:
        settings: Configuration the container was built from.
        logger: Structured logger shared by all services.
        cache: Redis adapter (also used by the health check).
        store: Credential store.
        users: User store.
        passwords: Password verifier.
        access_codec: Access token codec.
        refresh_codec: Refresh token codec.
        engine: Session engine.
        guard: Access guard.
        directory: User directory.
    """

    settings: Settings
    logger: LoggerProtocol
    redis: Redis
    cache: RedisAdapter
    store: CredentialStoreProtocol
    users: UserRepository
    passwords: PasswordHashingProtocol
    access_codec: TokenCodecProtocol
    refresh_codec: TokenCodecProtocol
    engine: SessionEngine
    guard: AccessGuard
    directory: UserDirectory
    owns_redis: bool = True

    async def aclose(self) -> None:
        """Release the Redis connection pool if the container created it."""
        if self.owns_redis:
            await self.redis.aclose()


def create_redis_client(settings: Settings) -> Redis:
    """Create an async Redis client with a bounded connection pool."""
    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=settings.cache_timeout_seconds,
        socket_timeout=settings.cache_timeout_seconds,
        socket_keepalive=True,
    )
    return Redis(connection_pool=pool)


def build_container(
    settings: Settings,
    *,
    redis_client: Redis | None = None,
    users: UserRepository | None = None,
    logger: LoggerProtocol | None = None,
) -> Container:
    """Wire all services from settings.

    Args:
        settings: Application settings.
        redis_client: Existing client to use (tests pass fakeredis). When
            omitted, a pooled client is created from settings.redis_url and
            closed by Container.aclose().
        users: User store; defaults to an empty in-memory store.
        logger: Logger; defaults to ConsoleAdapter configured from settings.
    """
    if logger is None:
        logger = ConsoleAdapter(
            use_json=settings.log_json or not settings.is_development,
            level=settings.log_level,
        )
    owns_redis = redis_client is None
    redis = redis_client if redis_client is not None else create_redis_client(settings)
    users = users if users is not None else InMemoryUserRepository()

    cache = RedisAdapter(redis, timeout_seconds=settings.cache_timeout_seconds)
    store = RedisCredentialStore(
        cache=cache,
        keys=CacheKeys(prefix=settings.cache_key_prefix),
        logger=logger,
    )
    passwords = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
    access_codec = JWTService(
        secret_key=settings.access_token_secret,
        lifetime=settings.access_token_ttl,
        token_type="access",
        algorithm=settings.jwt_algorithm,
    )
    refresh_codec = JWTService(
        secret_key=settings.refresh_token_secret,
        lifetime=settings.refresh_token_ttl,
        token_type="refresh",
        algorithm=settings.jwt_algorithm,
    )

    return Container(
        settings=settings,
        logger=logger,
        redis=redis,
        cache=cache,
        store=store,
        users=users,
        passwords=passwords,
        access_codec=access_codec,
        refresh_codec=refresh_codec,
        engine=SessionEngine(
            users=users,
            passwords=passwords,
            access_codec=access_codec,
            refresh_codec=refresh_codec,
            store=store,
            logger=logger,
        ),
        guard=AccessGuard(access_codec=access_codec, users=users, logger=logger),
        directory=UserDirectory(users=users, passwords=passwords, logger=logger),
        owns_redis=owns_redis,
    )
