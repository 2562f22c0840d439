# docbr/pipeline/log.py
#
# Progress lines for run_lote: one line per document kind with its
# valid/total count, prefixed by minutes:seconds since the batch started.
#
# Output goes to stdout and is flushed per line so `python -m
# docbr.pipeline.main` shows each kind as soon as it is checked.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def iniciar_relogio() -> None:
    """Zero the elapsed-time clock. Called once at the start of each run_lote."""
    global _start
    _start = time.monotonic()


def log(message: str) -> None:
    """Write a `[docbr MM:SS] message` line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[docbr {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
