"""Registration and login workflows.

The handlers know nothing about HTTP: they take a typed form, a user store
and (for login) a session context, and return an ``Outcome`` telling the
caller where to redirect or which field errors to render. ``StoreError``
is not caught here.
"""

import logging
from dataclasses import dataclass, field

from werkzeug.security import check_password_hash, generate_password_hash

from models import User

from . import validation
from .errors import AuthError, FieldErrors, UsernameTakenError
from .forms import LoginForm, RegistrationForm
from .session import SessionContext
from .store import UserStore

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "accounts.login"
LANDING_ENDPOINT = "ui.welcome"


@dataclass
class Outcome:
    redirect_to: str | None = None
    errors: FieldErrors = field(default_factory=FieldErrors)
    user_id: int | None = None
    user: User | None = None
    session: SessionContext | None = None

    @property
    def ok(self) -> bool:
        return self.redirect_to is not None and not self.errors


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    # check_password_hash compares digests with hmac.compare_digest
    return check_password_hash(password_hash, password)


def _ensure_available(store: UserStore, username: str) -> str:
    if store.find_by_username(username) is not None:
        raise UsernameTakenError()
    return username


def register(form: RegistrationForm, store: UserStore) -> Outcome:
    errors = FieldErrors()

    username = errors.collect("username", validation.check_username, form.username)
    if username is not None:
        username = errors.collect("username", _ensure_available, store, username)
    email = errors.collect("email", validation.check_email, form.email)
    password = errors.collect("password", validation.check_password, form.password)
    errors.collect("confirm_password", validation.check_confirmation, form.confirm_password, password)

    if errors:
        logger.debug("Signup rejected: %s", sorted(errors))
        return Outcome(errors=errors)

    try:
        user_id = store.insert_user(username, hash_password(password), email)
    except UsernameTakenError as exc:
        errors.add("username", exc.message)
        return Outcome(errors=errors)

    logger.info("Registered user %s (id=%s)", username, user_id)
    return Outcome(redirect_to=LOGIN_ENDPOINT, user_id=user_id)


def authenticate(store: UserStore, username: str, password: str) -> User:
    """Return the matching user or raise the one generic ``AuthError``."""
    user = store.find_by_username(username)
    if user is None or not verify_password(user.password, password):
        raise AuthError()
    return user


def login(form: LoginForm, session: SessionContext, store: UserStore) -> Outcome:
    if session.is_authenticated():
        return Outcome(redirect_to=LANDING_ENDPOINT, session=session)

    errors = FieldErrors()
    username = errors.collect("username", validation.require, form.username, "Please enter username.")
    password = errors.collect("password", validation.require, form.password, "Please enter your password.")
    if errors:
        return Outcome(errors=errors, session=session)

    try:
        user = authenticate(store, username, password)
    except AuthError as exc:
        logger.info("Failed login for %r", username)
        errors.add("login", exc.message)
        return Outcome(errors=errors, session=session)

    session.start_session()
    session.set("loggedin", True)
    session.set("id", user.id)
    session.set("username", user.username)
    logger.info("User %s logged in", user.username)
    return Outcome(redirect_to=LANDING_ENDPOINT, user_id=user.id, user=user, session=session)
