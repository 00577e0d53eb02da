import sys

from flask import Flask

from modules.accounts import handlers
from modules.accounts.forms import RegistrationForm
from modules.accounts.store import UserStore


def create_user(app: Flask, username: str, email: str, password: str) -> int:
    """Register a user through the signup rules; return a process exit code."""
    form = RegistrationForm(
        username=username,
        email=email,
        password=password,
        confirm_password=password,
    )
    with app.app_context():
        outcome = handlers.register(form, UserStore())

    if not outcome.ok:
        for field, messages in outcome.errors.items():
            for message in messages:
                print(f"{field}: {message}", file=sys.stderr)
        return 1

    print(f"Created user: {username} (id: {outcome.user_id})")
    return 0


if __name__ == '__main__':
    import argparse

    from app import create_app

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('username', help='Username (letters, digits, underscore)')
    parser.add_argument('email', help='Email address')
    parser.add_argument('password', help='Password (at least 6 characters)')

    args = parser.parse_args()
    sys.exit(create_user(create_app(), args.username, args.email, args.password))
