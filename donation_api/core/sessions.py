# donation_api/core/sessions.py
import threading
import uuid
from typing import Set


class SessionRegistry:
    """Admin tokens that are currently logged in.

    Lives in process memory only; a restart logs every admin out.
    """

    def __init__(self):
        self._tokens: Set[str] = set()
        self._lock = threading.Lock()

    def issue(self) -> str:
        token = str(uuid.uuid4())
        with self._lock:
            self._tokens.add(token)
        return token

    def is_valid(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.discard(token)

    def clear(self) -> None:
        with self._lock:
            self._tokens.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
