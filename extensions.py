from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

# current_user in templates; the user_loader lives in modules.accounts.routes
login_manager = LoginManager()
