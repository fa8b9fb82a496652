"""CORS preflight headers sent in answer to OPTIONS requests."""

from dataclasses import dataclass
from typing import Dict, Sequence


@dataclass(frozen=True)
class CorsPolicy:
    allow_headers: str = "Content-Type,Accept"
    max_age: int = 86400
    expose_headers: str = "Content-Type,Accept"

    def preflight_headers(self, allowed_methods: Sequence[str]) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Methods": ",".join(allowed_methods),
            "Access-Control-Allow-Headers": self.allow_headers,
            "Access-Control-Max-Age": str(self.max_age),
            "Access-Control-Expose-Headers": self.expose_headers,
        }
