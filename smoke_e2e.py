"""
End-to-end smoke test for a running BiasMeter AI backend.
Tests: health, analysis upload, formats, register/login/check/logout, users, analytics page

    uvicorn biasmeter.main:app --port 8080
    python smoke_e2e.py
"""
import io
import os
import time
import uuid

import requests

ROOT = os.getenv("BIASMETER_URL", "http://localhost:8080")
BASE = f"{ROOT}/api"
PASS = "\033[92m✓\033[0m"
FAIL = "\033[91m✗\033[0m"
INFO = "\033[94m→\033[0m"

results = []


def test(name, fn):
    try:
        t = time.time()
        result = fn()
        elapsed = round(time.time() - t, 2)
        print(f"  {PASS} {name} ({elapsed}s)")
        results.append((name, True, elapsed, None))
        return result
    except Exception as e:
        print(f"  {FAIL} {name}: {e}")
        results.append((name, False, 0, str(e)))
        return None


def expect(cond, msg):
    if not cond:
        raise AssertionError(msg)


print("\n🛡️  BiasMeter AI — End-to-End Smoke Suite")
print("=" * 60)

# ── Health ──────────────────────────────────────────────────────
print(f"\n{INFO} Health & Connectivity")


def health():
    d = requests.get(f"{BASE}/bias/health", timeout=5).json()
    expect(d.get("status") == "UP", f"status={d.get('status')}")
    return d


test("Health check", health)
test("API root", lambda: requests.get(f"{ROOT}/", timeout=5).raise_for_status())
test("Analytics page", lambda: expect(requests.get(f"{ROOT}/analytics", timeout=5).status_code == 200, "no page"))

# ── Analysis ────────────────────────────────────────────────────
print(f"\n{INFO} Bias Analysis")
csv_bytes = b"Gender,Experience,Position,Selected\nF,4,Engineer,1\nM,2,Analyst,0\n"

for industry in ["hiring", "finance", "education", "health", "justice", "ecommerce", "social", "industrial", "unknown"]:

    def run_analysis(i=industry):
        r = requests.post(
            f"{BASE}/bias/analyze",
            files={"file": (f"{i}.csv", io.BytesIO(csv_bytes), "text/csv")},
            data={"industry": i},
            timeout=10,
        )
        r.raise_for_status()
        d = r.json()
        expect(0 <= d["biasScore"] <= 100, f"biasScore={d['biasScore']}")
        expect(d["fileSize"] == len(csv_bytes), "fileSize mismatch")
        expect(len(d["recommendations"]) == 5, "expected 5 recommendations")
        return d

    test(f"Analyze: {industry}", run_analysis)

test(
    "Analyze without industry rejected",
    lambda: expect(
        requests.post(f"{BASE}/bias/analyze", files={"file": ("x.csv", csv_bytes, "text/csv")}, timeout=10).status_code
        == 400,
        "expected 400",
    ),
)
test(
    "Format: hiring",
    lambda: expect(
        requests.get(f"{BASE}/bias/format/hiring", timeout=5).json()["format"] == "Gender,Experience,Position,Selected",
        "wrong format",
    ),
)

# ── Auth ────────────────────────────────────────────────────────
print(f"\n{INFO} Auth & Sessions")
session = requests.Session()
email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"

test(
    "Register",
    lambda: expect(
        session.post(f"{BASE}/auth/register", json={"email": email, "password": "smoke123"}, timeout=5).json()["success"],
        "register failed",
    ),
)
test(
    "Duplicate register rejected",
    lambda: expect(
        session.post(f"{BASE}/auth/register", json={"email": email, "password": "smoke123"}, timeout=5).status_code == 400,
        "expected 400",
    ),
)
test(
    "Wrong password rejected",
    lambda: expect(
        session.post(f"{BASE}/auth/login", json={"email": email, "password": "nope"}, timeout=5).status_code == 401,
        "expected 401",
    ),
)
test("Login", lambda: session.post(f"{BASE}/auth/login", json={"email": email, "password": "smoke123"}, timeout=5).raise_for_status())
test("Check authenticated", lambda: expect(session.get(f"{BASE}/auth/check", timeout=5).json()["authenticated"], "not authenticated"))
test("Logout", lambda: session.post(f"{BASE}/auth/logout", timeout=5).raise_for_status())
test("Check after logout", lambda: expect(not session.get(f"{BASE}/auth/check", timeout=5).json()["authenticated"], "still authenticated"))
test("Users listing", lambda: expect(email in requests.get(f"{BASE}/auth/users", timeout=5).json()["userEmails"], "email missing"))

# ── Summary ──────────────────────────────────────────────────────
print("\n" + "=" * 60)
passed = sum(1 for _, ok, _, _ in results if ok)
failed = sum(1 for _, ok, _, _ in results if not ok)
total = len(results)
print(f"📊 Results: {passed}/{total} passed | {failed} failed")
if failed > 0:
    print("\nFailed tests:")
    for name, ok, _, err in results:
        if not ok:
            print(f"  {FAIL} {name}: {err}")
print()
