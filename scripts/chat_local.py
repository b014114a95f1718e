#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable session_id for the run
- Sends your typed messages through the same OrchestrateChatUseCase the API uses
- Prints decision details (intent, confidence, booking slots) and the reply text
"""

from __future__ import annotations

import asyncio
import os
import sys
import uuid
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.exceptions import ResponderError  # noqa: E402
from app.wiring.dependencies import build_container  # noqa: E402


def _print_header(session_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new session), /history, /booking, /quit, /help")
    print("-" * 60)


async def main() -> None:
    session_id = os.getenv("CHAT_SESSION_ID", "local_user_1")
    container = build_container()
    orchestrator = container.orchestrator
    store = container.store
    _print_header(session_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new     -> start a new session_id")
            print("  /history -> show the session history window")
            print("  /booking -> show the booking in progress")
            print("  /quit    -> exit")
            continue
        if cmd == "/new":
            session_id = str(uuid.uuid4())
            print(f"New session_id: {session_id}")
            continue
        if cmd == "/history":
            print("\n--- History ---")
            for entry in store.get_history(session_id):
                print(f"{entry.role}: {entry.content}")
            continue
        if cmd == "/booking":
            booking = store.get_booking(session_id)
            print(booking.to_dict() if booking else "(no booking)")
            continue

        try:
            reply = await orchestrator.handle(user_text, session_id)
        except ResponderError as e:
            print(f"ERROR: responder failed: {e}")
            continue

        print("\n--- Decision ---")
        print(f"intent: {reply.intent.value}")
        print(f"confidence: {reply.confidence:.2f}")
        if reply.booking:
            print(f"booking: {reply.booking.to_dict()}")

        print("\n--- Reply ---")
        print(reply.text.strip() or "(empty reply)")
        print("-" * 60)


if __name__ == "__main__":
    asyncio.run(main())
