"""
MCP Server Wrapping the todo REST API (`mcp_server.py`)
"""

import logging
import sys

import requests
from mcp.server.fastmcp import FastMCP

from todo_api.config import TODO_API_URL

logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Todo API MCP Server")


@mcp.resource("todo://list")
def list_todos() -> dict:
    """Fetch all todos from the REST API."""
    response = requests.get(f"{TODO_API_URL}/todo")
    response.raise_for_status()
    return response.json()


@mcp.tool()
def get_todo(todo_id: int) -> dict:
    """Fetch a single todo by id."""
    response = requests.get(f"{TODO_API_URL}/todo/{todo_id}")
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_todo(title: str, completed: bool = False) -> dict:
    """Add a new todo via the REST API."""
    payload = {"title": title, "completed": completed}
    response = requests.post(f"{TODO_API_URL}/todo", json=payload)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def update_todo(todo_id: int, title: str = None, completed: bool = None) -> dict:
    """Change the title and/or completion flag of a todo. Omitted fields stay as they are."""
    payload = {}
    if title is not None:
        payload["title"] = title
    if completed is not None:
        payload["completed"] = completed
    response = requests.put(f"{TODO_API_URL}/todo/{todo_id}", json=payload)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_todo(todo_id: int) -> dict:
    """Delete a todo by id."""
    response = requests.delete(f"{TODO_API_URL}/todo/{todo_id}")
    response.raise_for_status()
    return response.json()


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    logger.info(f"Starting MCP server for {TODO_API_URL}")
    mcp.run(transport="stdio")
