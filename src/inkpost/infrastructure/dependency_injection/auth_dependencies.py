"""Dependency factories that assemble per-request services.

Route handlers depend on the domain services; these factories build them from
the ``ServiceContext`` on ``app.state`` and the request's database session.
Tests replace any of them through ``app.dependency_overrides``.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.domain.interfaces.services import IIdentityVerifier, IPasswordHasher, ITokenService
from inkpost.domain.services.auth.auth_service import AuthService
from inkpost.domain.services.auth.username_allocator import UsernameAllocator
from inkpost.domain.services.blog.publish_service import PublishService
from inkpost.infrastructure.dependency_injection.service_context import ServiceContext
from inkpost.infrastructure.repositories.blog_repository import BlogRepository
from inkpost.infrastructure.repositories.user_repository import UserRepository


def get_service_context(request: Request) -> ServiceContext:
    return request.app.state.services


ServiceContextDep = Annotated[ServiceContext, Depends(get_service_context)]


async def get_db_session(services: ServiceContextDep) -> AsyncGenerator[AsyncSession, None]:
    """Yield one AsyncSession for the duration of the request."""
    async with services.database.session() as session:
        yield session


DBSessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_token_service(services: ServiceContextDep) -> ITokenService:
    return services.token_service


def get_password_hasher(services: ServiceContextDep) -> IPasswordHasher:
    return services.password_hasher


def get_identity_verifier(services: ServiceContextDep) -> IIdentityVerifier:
    return services.identity_verifier


def get_user_repository(db_session: DBSessionDep) -> UserRepository:
    return UserRepository(db_session)


def get_blog_repository(db_session: DBSessionDep) -> BlogRepository:
    return BlogRepository(db_session)


def get_auth_service(
    services: ServiceContextDep,
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[ITokenService, Depends(get_token_service)],
    identity_verifier: Annotated[IIdentityVerifier, Depends(get_identity_verifier)],
) -> AuthService:
    return AuthService(
        user_repository=user_repository,
        username_allocator=UsernameAllocator(user_repository),
        password_hasher=password_hasher,
        token_service=token_service,
        identity_verifier=identity_verifier,
        link_password_accounts=services.settings.GOOGLE_AUTH_LINK_PASSWORD_ACCOUNTS,
    )


def get_publish_service(
    db_session: DBSessionDep,
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    blog_repository: Annotated[BlogRepository, Depends(get_blog_repository)],
) -> PublishService:
    return PublishService(db_session, blog_repository, user_repository)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
PublishServiceDep = Annotated[PublishService, Depends(get_publish_service)]
