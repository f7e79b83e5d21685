from app.db.ids import new_id
from app.db.models.todo import Todo
from seed import todos, users


class TestCreateTodo:
    def test_creates_todo(self, client, db):
        text = "test todo text"
        res = client.post("/todos", json={"text": text})
        assert res.status_code == 200
        body = res.json()
        assert body["text"] == text
        assert body["completed"] is False
        assert body["completedAt"] is None
        assert body["_id"]

        stored = db.query(Todo).filter(Todo.text == text).all()
        assert len(stored) == 1
        assert stored[0].text == text

    def test_rejects_empty_text(self, client, db):
        res = client.post("/todos", json={"text": ""})
        assert res.status_code == 400
        assert db.query(Todo).count() == 2

    def test_rejects_whitespace_text(self, client, db):
        res = client.post("/todos", json={"text": "   "})
        assert res.status_code == 400
        assert db.query(Todo).count() == 2

    def test_rejects_non_string_text(self, client, db):
        res = client.post("/todos", json={"text": 123})
        assert res.status_code == 400
        assert res.json()["errors"][0]["field"] == "text"
        assert db.query(Todo).count() == 2

    def test_rejects_missing_body(self, client):
        res = client.post("/todos")
        assert res.status_code == 400

    def test_records_creator_when_authenticated(self, client, db):
        res = client.post(
            "/todos",
            json={"text": "owned todo"},
            headers={"x-auth": users[0]["tokens"][0]["token"]},
        )
        assert res.status_code == 200
        assert res.json()["creator"] == users[0]["id"]

    def test_created_todo_can_be_fetched(self, client):
        created = client.post("/todos", json={"text": "round trip"}).json()
        res = client.get(f"/todos/{created['_id']}")
        assert res.status_code == 200
        assert res.json()["todo"]["text"] == "round trip"
        assert res.json()["todo"]["completed"] is False


class TestListTodos:
    def test_returns_all_todos(self, client):
        res = client.get("/todos")
        assert res.status_code == 200
        assert len(res.json()["todos"]) == 2

    def test_lists_in_creation_order(self, client):
        texts = ["first new", "second new", "third new"]
        for text in texts:
            client.post("/todos", json={"text": text})
        res = client.get("/todos")
        assert [t["text"] for t in res.json()["todos"]][-3:] == texts


class TestGetTodo:
    def test_returns_todo(self, client):
        res = client.get(f"/todos/{todos[0]['id']}")
        assert res.status_code == 200
        assert res.json()["todo"]["text"] == todos[0]["text"]
        assert res.json()["todo"]["_id"] == todos[0]["id"]

    def test_missing_todo_is_404(self, client):
        res = client.get(f"/todos/{new_id()}")
        assert res.status_code == 404

    def test_invalid_id_is_404(self, client):
        res = client.get("/todos/123")
        assert res.status_code == 404


class TestDeleteTodo:
    def test_removes_todo(self, client, db):
        todo_id = todos[1]["id"]
        res = client.delete(f"/todos/{todo_id}")
        assert res.status_code == 200
        assert res.json()["todo"]["_id"] == todo_id
        assert res.json()["todo"]["text"] == todos[1]["text"]

        assert db.get(Todo, todo_id) is None
        assert client.get(f"/todos/{todo_id}").status_code == 404

    def test_missing_todo_is_404(self, client, db):
        res = client.delete(f"/todos/{new_id()}")
        assert res.status_code == 404
        assert db.query(Todo).count() == 2

    def test_invalid_id_is_404(self, client):
        res = client.delete("/todos/123")
        assert res.status_code == 404


class TestUpdateTodo:
    new_text = "this is updated text"

    def test_completes_todo(self, client):
        res = client.patch(
            f"/todos/{todos[0]['id']}",
            json={"completed": True, "text": self.new_text},
        )
        assert res.status_code == 200
        todo = res.json()["todo"]
        assert todo["text"] == self.new_text
        assert todo["completed"] is True
        assert isinstance(todo["completedAt"], int)

    def test_clears_completed_at_when_not_completed(self, client):
        res = client.patch(
            f"/todos/{todos[1]['id']}",
            json={"completed": False, "text": self.new_text},
        )
        assert res.status_code == 200
        todo = res.json()["todo"]
        assert todo["text"] == self.new_text
        assert todo["completed"] is False
        assert todo["completedAt"] is None

    def test_keeps_timestamp_of_completed_todo(self, client):
        res = client.patch(f"/todos/{todos[1]['id']}", json={"completed": True})
        assert res.status_code == 200
        assert res.json()["todo"]["completedAt"] == 333

    def test_text_only_update_leaves_completion(self, client):
        res = client.patch(f"/todos/{todos[1]['id']}", json={"text": self.new_text})
        todo = res.json()["todo"]
        assert todo["text"] == self.new_text
        assert todo["completed"] is True
        assert todo["completedAt"] == 333

    def test_rejects_empty_text(self, client, db):
        res = client.patch(f"/todos/{todos[0]['id']}", json={"text": ""})
        assert res.status_code == 400
        assert db.get(Todo, todos[0]["id"]).text == todos[0]["text"]

    def test_missing_todo_is_404(self, client):
        res = client.patch(f"/todos/{new_id()}", json={"completed": True})
        assert res.status_code == 404

    def test_invalid_id_is_404(self, client):
        res = client.patch("/todos/123", json={"completed": True})
        assert res.status_code == 404
