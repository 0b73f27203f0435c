from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from ..users.model import UserRecord
from .storage import Storage, load_stored_user

AUTH_USER_QUERY = "auth-user"


@dataclass
class SessionContext:
    """Explicit per-client session state.

    Holds the current user (mirrored in ``storage``) and whatever query
    results the client has cached while logged in.
    """

    storage: Storage
    user: Optional[UserRecord] = None
    is_loading: bool = True
    queries: dict[Hashable, Any] = field(default_factory=dict)

    @classmethod
    def restore(cls, storage: Storage) -> "SessionContext":
        ctx = cls(storage=storage)
        ctx.set_user(load_stored_user(storage))
        ctx.is_loading = False
        return ctx

    def set_user(self, user: Optional[UserRecord]) -> None:
        self.user = user
        self.queries[AUTH_USER_QUERY] = user

    def cache_query(self, key: Hashable, value: Any) -> None:
        self.queries[key] = value

    def cached(self, key: Hashable, default: Any = None) -> Any:
        return self.queries.get(key, default)

    def clear_queries(self) -> None:
        self.queries.clear()
