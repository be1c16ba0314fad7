from flask import Flask
from flask_cors import CORS

from . import config as default_config
from .errors import register_error_handlers
from .routes import todo_bp
from .service import TodoService
from .store import JsonFileTodoStore, TodoStore


def create_app(config: dict = None, store: TodoStore = None) -> Flask:
    """Build the todo API. Pass `store` to bypass the JSON file named by TODO_FILE."""
    app = Flask(__name__)
    app.config.update(default_config.defaults())
    if config:
        app.config.update(config)
    CORS(app)

    if store is None:
        store = JsonFileTodoStore(app.config["TODO_FILE"])
    app.extensions["todo_service"] = TodoService(store)

    app.register_blueprint(todo_bp)
    register_error_handlers(app)
    return app
