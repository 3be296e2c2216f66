"""Tests for the HTTP API."""
import pytest

from wastebot.app import create_app
from wastebot.config import Settings
from wastebot.tables import ASSISTANT_FALLBACK, GREETING_REPLY, HELP_RESPONSES, SUPPORT_RESPONSES


@pytest.fixture
def client(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


class TestHealth:
    """Tests for /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"ok": True, "tables": "builtin"}

    def test_health_with_table_file(self, tables_csv):
        app = create_app(Settings(tables_path=tables_csv, log_level="WARNING"))

        assert app.test_client().get("/health").get_json()["tables"] == "file"

    def test_broken_table_file_falls_back(self, tmp_path):
        path = tmp_path / "tables.csv"
        path.write_text("nothing useful\n", encoding="utf-8")
        app = create_app(Settings(tables_path=str(path), log_level="WARNING"))

        assert app.test_client().get("/health").get_json()["tables"] == "builtin"


class TestEngines:
    """Tests for /engines."""

    def test_lists_engines_and_modes(self, client):
        data = client.get("/engines").get_json()
        engines = {e["name"]: e for e in data["engines"]}

        assert engines["assistant"]["reply_delay_ms"] == 1000
        assert engines["assistant"]["submit_on_shift_enter"] is True
        assert engines["support"]["reply_delay_ms"] == 500
        assert engines["support"]["submit_on_shift_enter"] is False
        assert [m["name"] for m in engines["support"]["modes"]] == ["help", "support", "issue"]
        assert engines["support"]["modes"][1]["keywords"] == ["login", "error", "account", "payment"]


class TestChat:
    """Tests for /chat."""

    def test_defaults_to_assistant(self, client):
        data = client.post("/chat", json={"message": "hello"}).get_json()

        assert data == {"reply": GREETING_REPLY, "matched": "hello", "engine": "assistant", "mode": "assistant"}

    def test_keyword_reply(self, client):
        data = client.post("/chat", json={"message": "What's the collection schedule today?"}).get_json()

        assert data["matched"] == "collection schedule"
        assert data["reply"].startswith("Waste collection schedules vary by ward.")

    def test_default_reply(self, client):
        data = client.post("/chat", json={"message": "xyz"}).get_json()

        assert data["reply"] == ASSISTANT_FALLBACK
        assert data["matched"] is None

    def test_support_modes(self, client):
        support = client.post("/chat", json={"message": "I can't login", "engine": "support", "mode": "support"})
        help_ = client.post("/chat", json={"message": "I can't login", "engine": "support", "mode": "help"})

        assert support.get_json()["reply"] == SUPPORT_RESPONSES["login"]
        assert help_.get_json()["reply"] == HELP_RESPONSES["default"]

    def test_support_default_mode(self, client):
        data = client.post("/chat", json={"message": "dashboard", "engine": "support"}).get_json()

        assert data["mode"] == "help"

    def test_blank_message_is_ignored(self, client):
        response = client.post("/chat", json={"message": "   "})

        assert response.status_code == 200
        assert response.get_json()["reply"] is None

    def test_unknown_engine(self, client):
        response = client.post("/chat", json={"message": "hi", "engine": "nope"})

        assert response.status_code == 400
        assert "nope" in response.get_json()["error"]

    def test_unknown_mode(self, client):
        response = client.post("/chat", json={"message": "hi", "engine": "support", "mode": "billing"})

        assert response.status_code == 400
        assert "billing" in response.get_json()["error"]

    @pytest.mark.parametrize("field", ["engine", "mode"])
    def test_non_string_names_are_rejected(self, client, field):
        payload = {"message": "hi", "engine": "support", field: ["help"]}

        response = client.post("/chat", json=payload)

        assert response.status_code == 400
        assert "error" in response.get_json()
