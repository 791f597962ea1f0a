from __future__ import annotations

import time


def simulate_latency(seconds: float) -> None:
    """Blocking artificial delay standing in for a network round-trip."""
    if seconds and seconds > 0:
        time.sleep(seconds)
