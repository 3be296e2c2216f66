from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .tables import KeywordTable


# =========================
# Shortcuts (checked before the table scan)
# =========================
@dataclass(frozen=True)
class Shortcut:
    triggers: Tuple[str, ...]
    response: str

    def find_trigger(self, lowered: str) -> Optional[str]:
        for trigger in self.triggers:
            if trigger in lowered:
                return trigger
        return None


# =========================
# Matching
# =========================
def find_keyword(table: KeywordTable, text: str) -> Optional[str]:
    lowered = (text or "").lower()
    for keyword, _ in table.entries:
        if keyword in lowered:
            return keyword
    return None


def match(table: KeywordTable, text: str) -> str:
    # First declared keyword wins, even if a later one is a longer match
    lowered = (text or "").lower()
    for keyword, response in table.entries:
        if keyword in lowered:
            return response
    return table.default


def resolve(
    table: KeywordTable, text: str, shortcuts: Sequence[Shortcut] = ()
) -> Tuple[Optional[str], str]:
    """Return ``(trigger, response)``; trigger is None when the default applies."""
    lowered = (text or "").lower()
    for shortcut in shortcuts:
        trigger = shortcut.find_trigger(lowered)
        if trigger is not None:
            return trigger, shortcut.response
    return find_keyword(table, text), match(table, text)


def respond(table: KeywordTable, text: str, shortcuts: Sequence[Shortcut] = ()) -> str:
    return resolve(table, text, shortcuts)[1]
