"""Status classification domain model."""

from dataclasses import dataclass
from typing import Literal

BadgeCategory = Literal["available", "in-use", "offline"]
OnlineState = Literal["Online", "Offline"]

ONLINE_INDICATOR = "🟢"
OFFLINE_INDICATOR = "🔴"


@dataclass(frozen=True)
class Classification:
    """Presentation category derived from a raw vendor status code."""

    display_text: str
    badge: BadgeCategory
    online_state: OnlineState
    indicator: str

    @property
    def is_online(self) -> bool:
        """Whether the port is reachable (busy or free)."""
        return self.online_state == "Online"

    @property
    def state_text(self) -> str:
        """Indicator glyph followed by the online state, e.g. '🟢 Online'."""
        return f"{self.indicator} {self.online_state}"
