# ui_routes.py — public home page and the landing page behind login
from flask import Blueprint, render_template, session

from modules.accounts.permissions import session_required
from modules.accounts.session import SessionContext

ui = Blueprint("ui", __name__)

ARTICLE_SECTIONS = [
    "Geography & History",
    "Travel & Space",
    "Tech & Nature",
    "Business & Economics",
]


@ui.route("/")
def home():
    return render_template("home.html", sections=ARTICLE_SECTIONS)


@ui.route("/welcome")
@session_required
def welcome():
    return render_template("welcome.html", username=SessionContext(session).get("username"))
