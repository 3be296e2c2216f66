import argparse
import asyncio
from typing import List, Optional

from .config import get_settings
from .engines import ENGINES, ENTER, get_engine
from .errors import UnknownModeError
from .loader import apply_overrides, load_tables
from .logging import configure_logging
from .models import Message, Sender
from .session import ConversationSession

USER_LABEL = "You"


def render_message(message: Message, bot_label: str) -> str:
    label = USER_LABEL if message.sender is Sender.USER else bot_label
    # Content goes out verbatim; multi-line replies keep their layout
    return f"{label}: {message.content}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wastebot-chat", description="Chat with the waste management bots.")
    parser.add_argument("--engine", choices=sorted(ENGINES), default="assistant")
    parser.add_argument("--mode", default=None, help="support desk mode: help, support or issue")
    return parser


# =========================
# Terminal bridge
# =========================
async def chat(engine_name: str, mode: Optional[str] = None) -> None:
    settings = get_settings()
    tables = load_tables(settings.tables_path) if settings.tables_path else None
    engine = get_engine(engine_name, apply_overrides(ENGINES, tables))

    session = ConversationSession(engine)
    session.subscribe(lambda m: print(render_message(m, session.title or engine.name), flush=True))
    session.open(mode)

    loop = asyncio.get_running_loop()
    while True:
        try:
            line = await loop.run_in_executor(None, input, "> ")
        except EOFError:
            break

        command = line.strip()
        if command == "/quit":
            break
        if command == "/reset":
            current = session.mode
            session.close()
            session.open(current)
            continue
        if command.startswith("/mode"):
            try:
                session.open(command[len("/mode"):].strip() or None)
            except UnknownModeError as exc:
                print(exc)
            continue

        session.input_buffer = line
        if session.handle_key(ENTER):
            # Wait for the reply so it prints before the next prompt
            await session.wait_idle()

    session.close()


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    asyncio.run(chat(args.engine, args.mode))


if __name__ == "__main__":
    main()
