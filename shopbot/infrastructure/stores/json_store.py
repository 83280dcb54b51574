import json
import logging
import re
from pathlib import Path
from typing import Optional

from shopbot.core.models.chat import ConversationContext

logger = logging.getLogger(__name__)

_SAFE_ID_RE = re.compile(r"[^A-Za-z0-9_.-]")


class JsonConversationStore:
    """One JSON file per session under a directory."""

    def __init__(self, directory: str = "./sessions", max_history_length: int = 50):
        self._directory = Path(directory)
        self._max_history_length = max_history_length

    def _path(self, session_id: str) -> Path:
        return self._directory / f"{_SAFE_ID_RE.sub('_', session_id)}.json"

    def load(self, session_id: str) -> Optional[ConversationContext]:
        path = self._path(session_id)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ConversationContext.from_structured(
                data, max_history_length=self._max_history_length
            )
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to restore session {session_id}: {e}")
            return None

    def save(self, session_id: str, context: ConversationContext) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._path(session_id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(context.to_structured(), f, ensure_ascii=False, indent=2)
        logger.info(f"Saved session {session_id} ({context.message_count} messages)")

    def delete(self, session_id: str) -> None:
        self._path(session_id).unlink(missing_ok=True)
