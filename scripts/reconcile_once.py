"""Run one reconciliation pass against the configured store and report the result."""

from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.staff_movement.staff_movement.container import build_container
from src.staff_movement.staff_movement.sync.dispatcher import InlineDispatcher


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings, dispatcher=InlineDispatcher())

    snap = container.presence_board.refresh()
    stats = container.dispatcher.stats()
    out = sum(1 for s in snap.staff if s.current_status.value == "OUT_OF_OFFICE")

    print(f"{snap.as_of}: {len(snap.staff)} staff, {out} out of office")
    print(f"corrections: {stats.submitted} submitted, {stats.failed} failed")
    return 1 if stats.failed else 0


if __name__ == "__main__":
    sys.exit(main())
