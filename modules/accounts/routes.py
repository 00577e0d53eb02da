"""HTTP routes for signup, login and logout."""

from flask import render_template, redirect, url_for, request, flash, session
from flask_login import login_user, logout_user

from extensions import db, login_manager
from models import User

from . import bp, handlers
from .errors import FieldErrors, StoreError, TRY_AGAIN_LATER
from .forms import LoginForm, RegistrationForm
from .session import SessionContext
from .store import UserStore


@login_manager.user_loader
def load_user(user_id: str | None) -> User | None:
    """Resolve a ``User`` instance for Flask-Login sessions."""

    if not user_id:
        return None
    return db.session.get(User, int(user_id))


def _store_unavailable(template: str, form):
    flash(TRY_AGAIN_LATER, "danger")
    return render_template(template, form=form, errors=FieldErrors()), 503


@bp.route('/signup', methods=['GET', 'POST'])
def signup():
    form = RegistrationForm()
    errors = FieldErrors()

    if request.method == 'POST':
        form = RegistrationForm.from_mapping(request.form)
        try:
            outcome = handlers.register(form, UserStore())
        except StoreError:
            return _store_unavailable('signup.html', form)

        if outcome.ok:
            flash('Account created. Please log in.', 'success')
            return redirect(url_for(outcome.redirect_to))
        errors = outcome.errors

    return render_template('signup.html', form=form, errors=errors)


@bp.route('/login', methods=['GET', 'POST'])
def login():
    ctx = SessionContext(session)
    if request.method == 'GET' and ctx.is_authenticated():
        return redirect(url_for(handlers.LANDING_ENDPOINT))

    form = LoginForm()
    errors = FieldErrors()

    if request.method == 'POST':
        form = LoginForm.from_mapping(request.form)
        try:
            outcome = handlers.login(form, ctx, UserStore())
        except StoreError:
            return _store_unavailable('login.html', form)

        if outcome.ok:
            outcome.session.commit()
            if outcome.user is not None:
                login_user(outcome.user)
            return redirect(url_for(outcome.redirect_to))
        errors = outcome.errors

    return render_template('login.html', form=form, errors=errors)


@bp.route('/logout')
def logout():
    SessionContext(session).end()
    logout_user()
    return redirect(url_for('accounts.login'))
