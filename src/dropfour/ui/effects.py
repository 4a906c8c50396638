from __future__ import annotations
import sys
import time

from dropfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay: float = AI_THINK_DELAY_SEC) -> None:
    """
    Short visible pause with a spinner so AI replies are not instant.
    """
    if delay <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    frames = "|/-\\"
    end = time.monotonic() + delay
    i = 0
    while time.monotonic() < end:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
