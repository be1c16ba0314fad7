"""
Flask server exposing the todo list REST API backed by a JSON file.
"""

import logging

from todo_api import create_app

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = create_app()


def main():
    host = app.config["TODO_HOST"]
    port = app.config["TODO_PORT"]

    # Make sure the todo file exists before accepting traffic
    app.extensions["todo_service"].store.load_all()

    logger.info(f"Server running at http://{host}:{port}")
    logger.info(f"Todo data file: {app.config['TODO_FILE']}")
    app.run(host=host, port=port, debug=app.config["DEBUG"], threaded=True, use_reloader=False)


if __name__ == '__main__':
    main()
