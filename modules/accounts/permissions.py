"""Access gate for pages that need a logged-in visitor.

The session marker decides. A marker whose id no longer resolves to a user
is stale: it is dropped and the visitor is sent to the login form.
"""

from functools import wraps

from flask import abort, flash, redirect, request, session, url_for
from flask_login import current_user, login_user, logout_user

from .errors import StoreError, TRY_AGAIN_LATER
from .session import SessionContext
from .store import UserStore


def session_required(view_func):
    @wraps(view_func)
    def wrapped(*args, **kwargs):
        ctx = SessionContext(session)
        if not ctx.is_authenticated():
            flash("Please log in to see this page.", "info")
            return redirect(url_for("accounts.login", next=request.path))

        try:
            user = UserStore().find_by_id(ctx.get("id"))
        except StoreError:
            abort(503, description=TRY_AGAIN_LATER)

        if user is None:
            ctx.end()
            logout_user()
            flash("Your session has expired. Please log in again.", "info")
            return redirect(url_for("accounts.login"))

        # keep Flask-Login's current_user on the marker's account
        if not current_user.is_authenticated or current_user.get_id() != user.get_id():
            login_user(user)
        return view_func(*args, **kwargs)

    return wrapped
