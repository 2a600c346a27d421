"""
Seed script: replays a short editing session against a running API.

Usage:
    python -m scripts.seed_renders

What it submits:
- seg_001 color grade (high priority, still rendered in arrival order under fifo)
- seg_002 blur
- seg_003 transition
- after a short pause, seg_002 again with a speed change, which supersedes
  the blur if the worker hasn't reached it yet

Then it polls /renders/stats until the queue is drained and prints the history.

Run this after `uvicorn api.main:app` to see supersession in action.
"""

import time

import httpx

BASE_URL = "http://localhost:8000"

SESSION = [
    {"segment_id": "seg_001", "effect": "color_grade", "priority": "high"},
    {"segment_id": "seg_002", "effect": "blur", "priority": "normal"},
    {"segment_id": "seg_003", "effect": "transition", "priority": "normal"},
]
RESUBMIT = {"segment_id": "seg_002", "effect": "speed_change", "priority": "normal"}


def _submit(client: httpx.Client, render: dict) -> None:
    resp = client.post("/renders/", json=render)
    resp.raise_for_status()
    data = resp.json()
    print(f"  [{data['status']}] {data['id']} {data['segment_id']} → {data['effect']}")


def wait_until_drained(client: httpx.Client, timeout: float = 60.0) -> dict:
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        stats = client.get("/renders/stats").json()
        if stats["pending"] == 0 and stats["processing"] == 0:
            return stats
        time.sleep(0.25)
    raise TimeoutError(f"Queue didn't drain within {timeout}s")


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)

    print(f"Submitting {len(SESSION)} renders to {BASE_URL}...\n")
    for render in SESSION:
        _submit(client, render)

    time.sleep(0.2)
    print("\nEditor changes its mind about seg_002:")
    _submit(client, RESUBMIT)

    stats = wait_until_drained(client)

    print("\nHistory:")
    for job in client.get("/renders/").json()["jobs"]:
        took = f"{job['duration_ms']}ms" if job["duration_ms"] is not None else "-"
        print(f"  {job['id']}  {job['segment_id']:<8} {job['effect']:<13} {took:>7}  {job['status']}")

    print(
        f"\ndone={stats['done']} cancelled={stats['cancelled']} "
        f"avg={stats['avg_duration_ms']}ms"
    )


if __name__ == "__main__":
    seed()
