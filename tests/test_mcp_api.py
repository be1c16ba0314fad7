import unittest
from unittest.mock import patch

from mcp_server import add_todo, delete_todo, get_todo, list_todos, update_todo
from todo_api.config import TODO_API_URL


class TestMcpTools(unittest.TestCase):

    @patch("mcp_server.requests.get")
    def test_list_todos(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = {
            "success": True, "count": 1, "data": [{"id": 1, "title": "Mock Todo"}]
        }

        todos = list_todos()
        mock_get.assert_called_once_with(f"{TODO_API_URL}/todo")
        self.assertEqual(todos["data"][0]["title"], "Mock Todo")

    @patch("mcp_server.requests.get")
    def test_get_todo(self, mock_get):
        mock_get.return_value.json.return_value = {"success": True, "data": {"id": 3}}

        todo = get_todo(3)
        mock_get.assert_called_once_with(f"{TODO_API_URL}/todo/3")
        self.assertEqual(todo["data"]["id"], 3)

    @patch("mcp_server.requests.post")
    def test_add_todo(self, mock_post):
        mock_post.return_value.status_code = 201
        mock_post.return_value.json.return_value = {"success": True, "data": {"id": 2, "title": "New Todo"}}

        todo = add_todo("New Todo")
        mock_post.assert_called_once_with(
            f"{TODO_API_URL}/todo", json={"title": "New Todo", "completed": False}
        )
        self.assertEqual(todo["data"]["title"], "New Todo")

    @patch("mcp_server.requests.put")
    def test_update_todo_sends_only_given_fields(self, mock_put):
        mock_put.return_value.json.return_value = {"success": True, "data": {"id": 1, "completed": False}}

        update_todo(1, completed=False)
        mock_put.assert_called_once_with(f"{TODO_API_URL}/todo/1", json={"completed": False})

    @patch("mcp_server.requests.delete")
    def test_delete_todo(self, mock_delete):
        mock_delete.return_value.json.return_value = {"success": True, "data": {"id": 5}}

        result = delete_todo(5)
        mock_delete.assert_called_once_with(f"{TODO_API_URL}/todo/5")
        self.assertEqual(result["data"], {"id": 5})


if __name__ == "__main__":
    unittest.main()
