from typing import Optional

from flask import Flask, current_app, jsonify, request
from flask_cors import CORS

from .config import Settings, get_settings
from .engines import ENGINES, Engine, get_engine
from .errors import WastebotError
from .loader import apply_overrides, load_tables
from .logging import configure_logging, get_logger

log = get_logger(__name__)


def describe_engine(engine: Engine) -> dict:
    return {
        "name": engine.name,
        "reply_delay_ms": int(engine.reply_delay * 1000),
        "submit_on_shift_enter": engine.submit_on_shift_enter,
        "default_mode": engine.default_mode,
        "modes": [
            {
                "name": mode.name,
                "title": mode.title,
                "greeting": mode.greeting,
                "placeholder": mode.placeholder,
                "keywords": list(mode.table.keywords),
            }
            for mode in engine.modes.values()
        ],
    }


# =========================
# Flask app
# =========================
def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins)

    # Tables are read once here and never change while the app runs
    tables = load_tables(settings.tables_path) if settings.tables_path else None
    app.config["ENGINES"] = apply_overrides(ENGINES, tables)
    app.config["TABLES_SOURCE"] = "file" if tables else "builtin"

    @app.errorhandler(WastebotError)
    def bad_request(exc: WastebotError):
        return jsonify({"error": str(exc)}), 400

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "tables": current_app.config["TABLES_SOURCE"]})

    @app.get("/engines")
    def engines():
        return jsonify({"engines": [describe_engine(e) for e in current_app.config["ENGINES"].values()]})

    @app.post("/chat")
    def chat():
        data = request.get_json(force=True) or {}
        message = str(data.get("message") or "")
        engine = get_engine(data.get("engine"), current_app.config["ENGINES"])
        mode = engine.mode(data.get("mode"))

        # Blank input is ignored, not an error
        if not message.strip():
            return jsonify({"reply": None, "matched": None, "engine": engine.name, "mode": mode.name})

        matched, reply = mode.resolve(message)
        log.info("chat", engine=engine.name, mode=mode.name, matched=matched)
        return jsonify({"reply": reply, "matched": matched, "engine": engine.name, "mode": mode.name})

    return app


def main() -> None:
    settings = get_settings()
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    # Run: python -m wastebot.app
    main()
