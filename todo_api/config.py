"""
Default settings for the todo API, overridable through environment variables.
"""

import os

TODO_FILE = os.environ.get("TODO_FILE", os.path.join(os.getcwd(), "todos.json"))
TODO_HOST = os.environ.get("TODO_HOST", "127.0.0.1")
TODO_PORT = int(os.environ.get("TODO_PORT", "3000"))
TODO_DEBUG = os.environ.get("TODO_DEBUG") == "1"

# Base URL the MCP wrapper calls
TODO_API_URL = os.environ.get("TODO_API_URL", f"http://{TODO_HOST}:{TODO_PORT}")


def defaults() -> dict:
    return {
        "TODO_FILE": TODO_FILE,
        "TODO_HOST": TODO_HOST,
        "TODO_PORT": TODO_PORT,
        "DEBUG": TODO_DEBUG,
    }
