from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .errors import TableConfigError

DEFAULT_KEY = "default"


# =========================
# Keyword table
# =========================
@dataclass(frozen=True)
class KeywordTable:
    """Ordered (keyword, response) pairs plus one fallback response.

    Declaration order is matching order: the first keyword found in the
    input wins, so entries are kept as a tuple rather than a dict.
    """

    entries: Tuple[Tuple[str, str], ...]
    default: str

    def __post_init__(self):
        if not self.default:
            raise TableConfigError("keyword table needs a non-empty default response")
        seen = set()
        for keyword, response in self.entries:
            if not keyword:
                raise TableConfigError("keywords must be non-empty")
            if keyword != keyword.lower():
                raise TableConfigError(f"keyword {keyword!r} must be lowercase")
            if keyword == DEFAULT_KEY:
                raise TableConfigError(f"{DEFAULT_KEY!r} is reserved for the fallback response")
            if keyword in seen:
                raise TableConfigError(f"duplicate keyword {keyword!r}")
            if not response:
                raise TableConfigError(f"keyword {keyword!r} has an empty response")
            seen.add(keyword)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "KeywordTable":
        if DEFAULT_KEY not in mapping:
            raise TableConfigError(f"keyword table is missing a {DEFAULT_KEY!r} response")
        entries = tuple((k, v) for k, v in mapping.items() if k != DEFAULT_KEY)
        return cls(entries=entries, default=mapping[DEFAULT_KEY])

    @property
    def keywords(self) -> Tuple[str, ...]:
        return tuple(keyword for keyword, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


# =========================
# Assistant (waste management FAQ)
# =========================
ASSISTANT_GREETING = (
    "Hello! I'm your waste management assistant. "
    "Ask me about collection schedules, waste segregation, or filing complaints."
)

GREETING_REPLY = "Hello! How can I help you with waste management today?"

HELP_OVERVIEW = (
    "I can help you with:\n"
    "• Collection schedules\n"
    "• Waste segregation guidelines\n"
    "• Filing complaints\n"
    "• Contact information\n"
    "• Payment queries"
)

ASSISTANT_FALLBACK = (
    "I'm sorry, I didn't understand that. Try asking about collection schedules, "
    "waste segregation, complaints, or type \"help\" for more options."
)

ASSISTANT_RESPONSES: Dict[str, str] = {
    "collection schedule": (
        "Waste collection schedules vary by ward. Generally, wet waste is collected daily, "
        "dry waste 3 times a week, and hazardous waste once a month. "
        "Check with your local collector for specific timings."
    ),
    "segregation": (
        "Proper waste segregation is crucial: \n"
        "• Wet waste: Food scraps, vegetable peels, garden waste\n"
        "• Dry waste: Paper, plastic, metal, glass\n"
        "• Hazardous waste: Electronics, batteries, medical waste"
    ),
    "complaint": (
        "To file a complaint: \n"
        "1. Go to the Complaints section\n"
        "2. Fill out the complaint form\n"
        "3. Add photos if available\n"
        "4. Submit and track the status"
    ),
    "contact": (
        "For urgent issues, contact your ward office directly. "
        "Non-urgent complaints can be submitted through this portal."
    ),
    "payment": (
        "Waste collection fees are typically charged monthly. "
        "Contact your ward office for payment methods and schedules."
    ),
    DEFAULT_KEY: ASSISTANT_FALLBACK,
}

# =========================
# Support desk (help / support / issue)
# =========================
HELP_RESPONSES: Dict[str, str] = {
    "collection": (
        "To manage waste collections, go to the Collections page from the sidebar. "
        "You can view scheduled pickups and their status."
    ),
    "complaint": (
        "To file a complaint, navigate to the Complaints page. "
        "Click \"New Complaint\" and fill in the details."
    ),
    "profile": (
        "You can update your profile in Settings. "
        "Click on your avatar or name to access profile settings."
    ),
    "notification": (
        "Notification preferences can be managed in Settings "
        "under the Notification Preferences section."
    ),
    "dashboard": (
        "The dashboard shows your overview. Admins see system-wide stats, "
        "collectors see their routes, and residents see their collection schedule."
    ),
    DEFAULT_KEY: (
        "I can help you with collections, complaints, profiles, notifications, "
        "and dashboard navigation. What would you like to know more about?"
    ),
}

SUPPORT_RESPONSES: Dict[str, str] = {
    "login": (
        "If you're having trouble logging in, try resetting your password. "
        "If the issue persists, our team will assist you within 24 hours."
    ),
    "error": (
        "Please describe the error message you're seeing, and I'll help troubleshoot. "
        "Common issues can often be resolved by refreshing the page."
    ),
    "account": (
        "For account-related issues, I can help with password resets, "
        "email changes, or account access problems."
    ),
    "payment": (
        "For billing or payment questions, our support team will respond within 24 hours. "
        "Please provide your account details."
    ),
    DEFAULT_KEY: (
        "I've logged your support request. Our team typically responds within 24 hours. "
        "Is there anything specific I can help with right now?"
    ),
}

ISSUE_RESPONSES: Dict[str, str] = {
    "bug": (
        "Thank you for reporting this bug. I've logged it for our development team. "
        "Can you provide steps to reproduce it?"
    ),
    "slow": (
        "If the app is running slowly, try clearing your browser cache or using a "
        "different browser. I've noted the performance issue."
    ),
    "missing": (
        "If you're seeing missing data or features, please let me know which page "
        "you're on. I've logged this issue."
    ),
    "broken": (
        "Thank you for reporting this broken feature. Our team will investigate. "
        "Can you tell me what you were trying to do?"
    ),
    DEFAULT_KEY: (
        "I've logged your issue report. Our team reviews all reports and prioritizes "
        "them based on severity. Thank you for helping us improve!"
    ),
}

ASSISTANT_TABLE = KeywordTable.from_mapping(ASSISTANT_RESPONSES)
HELP_TABLE = KeywordTable.from_mapping(HELP_RESPONSES)
SUPPORT_TABLE = KeywordTable.from_mapping(SUPPORT_RESPONSES)
ISSUE_TABLE = KeywordTable.from_mapping(ISSUE_RESPONSES)
