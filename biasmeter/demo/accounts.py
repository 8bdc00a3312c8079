"""Demo accounts seeded into every fresh user store."""

from __future__ import annotations

from typing import Any, Dict, List

DEMO_ACCOUNTS: List[Dict[str, Any]] = [
    {
        "email": "demo@biasmeter.ai",
        "password": "demo123",
        "name": "Demo User",
        "role": "user",
        "company": "Demo Corp",
    },
    {
        "email": "admin@biasmeter.ai",
        "password": "admin123",
        "name": "Admin User",
        "role": "admin",
        "company": "BiasMeter AI",
    },
]
