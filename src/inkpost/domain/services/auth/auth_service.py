"""Account creation and sign-in for password and Google accounts."""

import re

from structlog import get_logger

from inkpost.core.config.settings import FULLNAME_MIN_LENGTH
from inkpost.core.exceptions import (
    DuplicateUserError,
    IdentityVerificationError,
    InvalidCredentialsError,
    PermissionError,
    UserNotFoundError,
    ValidationError,
)
from inkpost.core.logging import mask_email
from inkpost.domain.entities.user import User, default_profile_img
from inkpost.domain.interfaces.repositories import IUserRepository
from inkpost.domain.interfaces.services import (
    IIdentityVerifier,
    IPasswordHasher,
    ITokenService,
)
from inkpost.domain.services.auth.password_policy import PasswordPolicyValidator
from inkpost.domain.services.auth.username_allocator import UsernameAllocator
from inkpost.domain.value_objects.auth_payload import AuthPayload

logger = get_logger(__name__)

EMAIL_REGEX = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+$", re.ASCII)

GOOGLE_AUTH_FAILED = (
    "Failed to authenticate you with google. Try with some other google account"
)
GOOGLE_ACCOUNT_NEEDS_GOOGLE = (
    "Account was created using google. Try logging in with google."
)
PASSWORD_ACCOUNT_NEEDS_PASSWORD = (
    "This email was signed up without google. "
    "Please log in with password to access the account"
)


class AuthService:
    """
    Service for password signup, password signin and Google sign-in.

    Every successful call answers with an ``AuthPayload`` carrying a freshly
    issued access token. Validation and credential failures are raised as
    ``InkpostError`` subclasses and mapped to HTTP responses by the API layer.

    Attributes:
        user_repository (IUserRepository): Credential store.
        username_allocator (UsernameAllocator): Derives handles for new accounts.
        password_hasher (IPasswordHasher): Bcrypt hashing, off the event loop.
        token_service (ITokenService): Issues access tokens.
        identity_verifier (IIdentityVerifier): Checks Google ID tokens.
        link_password_accounts (bool): Whether a verified Google identity may
            sign in to an existing password account with the same email.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        username_allocator: UsernameAllocator,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
        identity_verifier: IIdentityVerifier,
        link_password_accounts: bool = True,
    ):
        self.user_repository = user_repository
        self.username_allocator = username_allocator
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.identity_verifier = identity_verifier
        self.link_password_accounts = link_password_accounts
        self.password_policy = PasswordPolicyValidator()

    def _payload(self, user: User) -> AuthPayload:
        return AuthPayload.for_user(user, self.token_service.issue(user.id))

    def _validate_signup(self, fullname: str, email: str, password: str) -> None:
        if len(fullname) < FULLNAME_MIN_LENGTH:
            raise ValidationError("Fullname must be at least 3 letters long")
        if not email:
            raise ValidationError("Enter email")
        if not EMAIL_REGEX.match(email):
            raise ValidationError("Email is invalid")
        self.password_policy.validate(password)

    async def signup(self, fullname: str, email: str, password: str) -> AuthPayload:
        """
        Register a password account.

        Args:
            fullname (str): Display name, at least three characters.
            email (str): Email address; stored lower-cased.
            password (str): Plaintext password, checked against the password policy.

        Returns:
            AuthPayload: Profile fields and access token of the new account.

        Raises:
            ValidationError: If a field is missing or malformed.
            PasswordPolicyError: If the password does not meet the policy.
            DuplicateUserError: If the email is already registered.
        """
        fullname = fullname or ""
        email = (email or "").strip()
        self._validate_signup(fullname, email, password)
        email = email.lower()

        if await self.user_repository.get_by_email(email):
            logger.info("Signup rejected, email already registered", email=mask_email(email))
            raise DuplicateUserError("Email already exists")

        hashed_password = await self.password_hasher.hash(password)
        username = await self.username_allocator.allocate(email)
        user = await self.user_repository.create(
            User(fullname=fullname, email=email, password=hashed_password, username=username)
        )

        logger.info("New user registered", user_id=user.id, username=user.username)
        return self._payload(user)

    async def signin(self, email: str, password: str) -> AuthPayload:
        """
        Authenticate a password account.

        Raises:
            UserNotFoundError: If no account has this email.
            InvalidCredentialsError: If the account has no password (it was
                created through Google) or the password does not match.
        """
        email = (email or "").strip().lower()
        user = await self.user_repository.get_by_email(email)
        if not user:
            logger.warning("Signin for unknown email", email=mask_email(email))
            raise UserNotFoundError("Email not found")

        if not user.has_password:
            logger.warning("Password signin on a Google account", user_id=user.id)
            raise InvalidCredentialsError(GOOGLE_ACCOUNT_NEEDS_GOOGLE)

        if not await self.password_hasher.verify(password or "", user.password):
            logger.warning("Incorrect password", user_id=user.id)
            raise InvalidCredentialsError("Incorrect password")

        logger.info("User signed in", user_id=user.id)
        return self._payload(user)

    async def google_auth(self, id_token: str) -> AuthPayload:
        """
        Sign in with a Google ID token, creating the account on first use.

        The verified email is the account key. An existing account is reused;
        a new one is created with ``google_auth=True``, no password, the
        verified name and the 384px avatar variant.

        Raises:
            IdentityVerificationError: If the token cannot be verified.
            PermissionError: If the email belongs to a password account and
                linking is disabled.
        """
        try:
            identity = await self.identity_verifier.verify(id_token)
        except IdentityVerificationError as e:
            logger.warning("Google token rejected", error=str(e))
            raise IdentityVerificationError(GOOGLE_AUTH_FAILED) from e

        user = await self.user_repository.get_by_email(identity.email)
        if user:
            if not user.google_auth and not self.link_password_accounts:
                logger.warning("Google signin blocked for password account", user_id=user.id)
                raise PermissionError(PASSWORD_ACCOUNT_NEEDS_PASSWORD)
            logger.info("User signed in with google", user_id=user.id)
            return self._payload(user)

        username = await self.username_allocator.allocate(identity.email)
        user = await self.user_repository.create(
            User(
                fullname=identity.name,
                email=identity.email,
                username=username,
                profile_img=identity.large_picture() or default_profile_img(),
                google_auth=True,
            )
        )
        logger.info(
            "New user registered with google",
            user_id=user.id,
            email=identity.mask_for_logging(),
        )
        return self._payload(user)
