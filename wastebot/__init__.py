"""Rule-based chat bots for the waste management dashboard."""

from .engines import ASSISTANT, ENGINES, SUPPORT_DESK, Engine, Mode, get_engine
from .errors import TableConfigError, UnknownEngineError, UnknownModeError, WastebotError
from .matcher import Shortcut, match, respond
from .models import Message, Sender
from .session import ConversationSession
from .tables import KeywordTable

__version__ = "0.1.0"

__all__ = [
    "ASSISTANT",
    "ENGINES",
    "SUPPORT_DESK",
    "ConversationSession",
    "Engine",
    "KeywordTable",
    "Message",
    "Mode",
    "Sender",
    "Shortcut",
    "TableConfigError",
    "UnknownEngineError",
    "UnknownModeError",
    "WastebotError",
    "get_engine",
    "match",
    "respond",
]
