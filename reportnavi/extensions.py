"""Flask extensions are instantiated here.

To avoid circular imports with views and create_app(), extensions are instantiated here.
They will be initialized (calling init_app()) in app.py.
The storage backend extension lives in `reportnavi.core.storage`.
"""

from flask_login import LoginManager
from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

ma = Marshmallow()

login_manager = LoginManager()
login_manager.session_protection = 'basic'
