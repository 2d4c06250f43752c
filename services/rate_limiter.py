# services/rate_limiter.py
import threading
import time


class RateLimitDecision:
    def __init__(self, allowed, limit, remaining, reset_at):
        self.allowed = allowed
        self.limit = limit
        self.remaining = remaining
        self.reset_at = reset_at

    def retry_after(self, now):
        """Whole seconds until the window resets (at least 1 when blocked)."""
        return max(1, int(round(self.reset_at - now)))

    def headers(self):
        return {
            'X-RateLimit-Limit': str(self.limit),
            'X-RateLimit-Remaining': str(self.remaining),
            'X-RateLimit-Reset': str(int(self.reset_at)),
        }


class RateLimiter:
    """
    Fixed-window request limiter keyed by an identifier such as an IP hash.

    One instance is created by the app factory and shared across requests;
    a lock guards the window table.
    """

    def __init__(self, max_requests=5, window_seconds=60, clock=time.time):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows = {}  # identifier -> [count, reset_at]
        self._lock = threading.Lock()

    def check(self, identifier):
        """Count one request for identifier and report whether it is allowed."""
        with self._lock:
            now = self.clock()
            self._prune(now)

            window = self._windows.get(identifier)
            if window is None:
                reset_at = now + self.window_seconds
                self._windows[identifier] = [1, reset_at]
                return RateLimitDecision(True, self.max_requests, self.max_requests - 1, reset_at)

            count, reset_at = window
            if count >= self.max_requests:
                return RateLimitDecision(False, self.max_requests, 0, reset_at)

            window[0] = count + 1
            return RateLimitDecision(True, self.max_requests, self.max_requests - window[0], reset_at)

    def reset(self, identifier=None):
        with self._lock:
            if identifier is None:
                self._windows.clear()
            else:
                self._windows.pop(identifier, None)

    def _prune(self, now):
        expired = [key for key, (_, reset_at) in self._windows.items() if reset_at <= now]
        for key in expired:
            del self._windows[key]
