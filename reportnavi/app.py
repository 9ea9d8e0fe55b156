"""Flask application factory."""

import time
from importlib import import_module
import logging
import logging.config

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix
import psycopg2
import sqlalchemy.exc

from reportnavi.blueprints import all_blueprints
from reportnavi.core.storage import storage
from reportnavi.extensions import db, ma, login_manager

log = logging.getLogger(__name__)


def configure_logging():
    """Log to stderr and keep the errors in a weekly rotated file."""
    logging.config.dictConfig({
        'version': 1,
        'formatters': {
            'default': {
                'datefmt': '%d/%m %H:%M:%S',
                'format': '[%(asctime)s] [%(levelname)8s] %(message)s (%(name)s:%(lineno)s)',
            }
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': 'DEBUG',
            },
            'logfile': {
                'class': 'logging.handlers.TimedRotatingFileHandler',
                'filename': './reportnavi.log',
                'formatter': 'default',
                'when': 'W0',  # will start a new file each Monday
                'backupCount': 5,  # will only keep the 5 latest files,
                'level': 'ERROR',
                'delay': True,
            }
        },
        'loggers': {
            'werkzeug': {
                'handlers': ['stderr'],
                'propagate': False,
            }
        },
        'root': {
            'level': 'DEBUG',
            'handlers': ['stderr', 'logfile']
        },
        'disable_existing_loggers': False,
    })


def connect_remote(app):
    """Wait for the remote database to come up and create the missing tables."""
    for _ in range(3):
        try:
            with app.app_context(), db.engine.connect():
                pass
            break
        except (RuntimeError, psycopg2.OperationalError, sqlalchemy.exc.OperationalError) as err:
            log.exception(f'Couldn\'t connect to DB. Error: {err.with_traceback(None)}. retrying..')
            time.sleep(5)
    else:
        raise Exception('Database unreachable')

    with app.app_context():
        db.create_all()


def create_app(config='config/prod.py'):
    """Create Flask application with given configuration"""
    app = Flask(__name__, static_folder=None)
    app.config.from_pyfile(config)

    if not app.config.get('TESTING'):
        configure_logging()

    # Initialize extensions/add-ons/plugins.
    db.init_app(app)
    ma.init_app(app)
    login_manager.init_app(app)
    storage.init_app(app)

    if app.extensions['storage'].is_remote_backend():
        connect_remote(app)

    for blueprint in all_blueprints:
        import_module(blueprint.import_name)
        app.register_blueprint(blueprint)

    # Needed when running behind a reverse proxy for the session cookies
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_host=1)
    return app


def bootstrap_debug():
    '''Create a development-configured application and push its context.
       Helpful for trying the storage and the workflow in the REPL.

       Launch IPython and run the following lines:
       ```python
       from reportnavi.app import bootstrap_debug
       bootstrap_debug()
       from reportnavi.core.storage import storage
       from reportnavi.core.workflow import ReportWorkflow
       workflow = ReportWorkflow(storage.backend)
       ```
    '''
    app = create_app('config/dev.py')
    app.app_context().push()
