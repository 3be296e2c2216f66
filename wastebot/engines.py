from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional, Tuple

from .errors import UnknownEngineError, UnknownModeError
from .matcher import Shortcut, resolve, respond
from .tables import (
    ASSISTANT_GREETING,
    ASSISTANT_TABLE,
    GREETING_REPLY,
    HELP_OVERVIEW,
    HELP_TABLE,
    ISSUE_TABLE,
    SUPPORT_TABLE,
    KeywordTable,
)

ENTER = "Enter"


@dataclass(frozen=True)
class Mode:
    name: str
    title: str
    greeting: str
    placeholder: str
    table: KeywordTable
    shortcuts: Tuple[Shortcut, ...] = ()

    def reply(self, text: str) -> str:
        return respond(self.table, text, self.shortcuts)

    def resolve(self, text: str) -> Tuple[Optional[str], str]:
        return resolve(self.table, text, self.shortcuts)


@dataclass(frozen=True)
class Engine:
    """One chat surface: its modes, reply delay and Enter-key policy."""

    name: str
    reply_delay: float
    submit_on_shift_enter: bool
    modes: Dict[str, Mode]
    default_mode: str

    def mode(self, name: Optional[str] = None) -> Mode:
        key = name or self.default_mode
        # Unhashable names (lists, dicts from JSON) are unknown too
        try:
            return self.modes[key]
        except (KeyError, TypeError):
            raise UnknownModeError(key) from None

    def should_submit(self, key: str, shift: bool = False) -> bool:
        if key != ENTER:
            return False
        return self.submit_on_shift_enter or not shift

    def with_tables(self, tables: Mapping[str, KeywordTable]) -> "Engine":
        modes = {
            name: replace(mode, table=tables[name]) if name in tables else mode
            for name, mode in self.modes.items()
        }
        return replace(self, modes=modes)


# =========================
# Assistant (floating widget)
# =========================
ASSISTANT_SHORTCUTS = (
    Shortcut(triggers=("hello", "hi", "hey"), response=GREETING_REPLY),
    Shortcut(triggers=("help",), response=HELP_OVERVIEW),
)

ASSISTANT = Engine(
    name="assistant",
    reply_delay=1.0,
    submit_on_shift_enter=True,
    modes={
        "assistant": Mode(
            name="assistant",
            title="Waste Management Assistant",
            greeting=ASSISTANT_GREETING,
            placeholder="Ask about waste management...",
            table=ASSISTANT_TABLE,
            shortcuts=ASSISTANT_SHORTCUTS,
        ),
    },
    default_mode="assistant",
)

# =========================
# Support desk (side panel)
# =========================
SUPPORT_DESK = Engine(
    name="support",
    reply_delay=0.5,
    submit_on_shift_enter=False,
    modes={
        "help": Mode(
            name="help",
            title="Help Center",
            greeting="Hi! I'm here to help you navigate the app. What would you like to know?",
            placeholder="Type your message...",
            table=HELP_TABLE,
        ),
        "support": Mode(
            name="support",
            title="Contact Support",
            greeting=(
                "Hello! I'm here to help with any technical issues or questions. "
                "Please describe your problem."
            ),
            placeholder="Type your message...",
            table=SUPPORT_TABLE,
        ),
        "issue": Mode(
            name="issue",
            title="Report an Issue",
            greeting="Thank you for reporting an issue. Please describe what's not working as expected.",
            placeholder="Type your message...",
            table=ISSUE_TABLE,
        ),
    },
    default_mode="help",
)

ENGINES: Dict[str, Engine] = {engine.name: engine for engine in (ASSISTANT, SUPPORT_DESK)}


def get_engine(name: Optional[str] = None, engines: Optional[Mapping[str, Engine]] = None) -> Engine:
    engines = ENGINES if engines is None else engines
    key = name or ASSISTANT.name
    try:
        return engines[key]
    except (KeyError, TypeError):
        raise UnknownEngineError(key) from None
