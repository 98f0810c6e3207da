import time
import asyncio
from collections import deque
from typing import Callable, Iterable
from fastapi import Request
from fastapi.responses import JSONResponse
from app.utils.security import InvalidToken, bearer_token, decode_token

class RateLimitMiddleware:
    def __init__(
        self,
        app,
        *,
        window_seconds: int,
        max_calls: int,
        key_func: Callable[[Request], str],
        include_path_prefixes: Iterable[str] = ("/register", "/login", "/tasks", "/uploads"),
    ):
        self.app = app
        self.window = window_seconds
        self.max_calls = max_calls
        self.key_func = key_func
        self.include_paths = tuple(include_path_prefixes)

        self._buckets: dict[str, deque[float]] = {}
        self._lock = asyncio.Lock()
        self._last_sweep = 0.0

    def _sweep(self, now: float) -> None:
        """Drop buckets with no calls left inside the window."""
        cutoff = now - self.window
        stale = [k for k, q in self._buckets.items() if not q or q[-1] < cutoff]
        for k in stale:
            del self._buckets[k]
        self._last_sweep = now

    def _should_guard(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.include_paths)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        path = scope.get("path", "")
        if not self._should_guard(path):
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive)
        key = self.key_func(request)

        now = time.time()
        async with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)

            q = self._buckets.get(key)
            if q is None:
                q = deque()
                self._buckets[key] = q

            cutoff = now - self.window
            while q and q[0] < cutoff:
                q.popleft()

            if len(q) >= self.max_calls:
                retry_after = max(1, int(q[0] + self.window - now))
                resp = JSONResponse(
                    status_code=429,
                    content={"message": "Too Many Attempts."},
                )
                resp.headers["Retry-After"] = str(retry_after)
                return await resp(scope, receive, send)

            q.append(now)

        return await self.app(scope, receive, send)


def client_key(req: Request) -> str:
    """Throttle per user when a valid bearer token is sent, else per client IP."""
    token = bearer_token(req.headers.get("authorization"))
    if token:
        try:
            return f"user:{decode_token(token).id}"
        except InvalidToken:
            pass

    ip = req.client.host if req.client else "unknown"
    return f"ip:{ip}"
