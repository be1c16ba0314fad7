import re

from flask import Blueprint, current_app, jsonify, request

from .errors import ValidationError
from .models import TodoCreate, parse_payload

todo_bp = Blueprint("todo", __name__)

# ASCII digits only, other Unicode digits never form an id
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_todo_id(raw: str):
    """Integer prefix of a path segment ("12abc" -> 12), or None when there is none."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Too many digits for int(); no stored id can match
        return None


def request_body() -> dict:
    data = request.get_json(silent=True)
    if data is None and request.is_json and request.get_data():
        raise ValidationError("Request body is not valid JSON")
    return data if isinstance(data, dict) else {}


def service():
    return current_app.extensions["todo_service"]


@todo_bp.route("/todo", methods=["GET"])
def list_todos():
    todos = service().list_todos()
    return jsonify({
        "success": True,
        "count": len(todos),
        "data": [todo.to_dict() for todo in todos],
    })


@todo_bp.route("/todo/<raw_id>", methods=["GET"])
def get_todo(raw_id):
    todo = service().get_todo(parse_todo_id(raw_id), raw_id)
    return jsonify({"success": True, "data": todo.to_dict()})


@todo_bp.route("/todo", methods=["POST"])
def create_todo():
    payload = parse_payload(TodoCreate, request_body())
    todo = service().create_todo(payload)
    return jsonify({"success": True, "message": "Todo created", "data": todo.to_dict()}), 201


@todo_bp.route("/todo/<raw_id>", methods=["PUT"])
def update_todo(raw_id):
    # The body is validated only once the todo is known to exist
    todo = service().update_todo(parse_todo_id(raw_id), request_body(), raw_id)
    return jsonify({"success": True, "message": "Todo updated", "data": todo.to_dict()})


@todo_bp.route("/todo/<raw_id>", methods=["DELETE"])
def delete_todo(raw_id):
    todo_id = service().delete_todo(parse_todo_id(raw_id), raw_id)
    return jsonify({"success": True, "message": f"Todo {todo_id} deleted", "data": {"id": todo_id}})
