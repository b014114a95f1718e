#!/usr/bin/env python3
"""Smoke script for a running booking assistant server."""

import sys
import uuid

import httpx


BASE_URL = "http://127.0.0.1:8001"


def send_chat(session_id: str, message: str) -> dict | None:
    """Send one chat message and print the reply."""
    try:
        response = httpx.post(
            f"{BASE_URL}/chat",
            json={"message": message},
            headers={"x-session-id": session_id},
            timeout=60.0,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return None

    data = response.json()
    print(f"\n> {message}")
    print(f"  intent={data['intent']} confidence={data['confidence']:.2f}")
    print(f"  booking={data['booking']}")
    print(f"  {data['message']}")
    return data


def check_validate() -> bool:
    """Validate a known-bad pairing: Carlos does not do massages."""
    print("\n" + "=" * 60)
    print("Testing POST /booking/validate")
    print("=" * 60)

    payload = {"service": "serv-003", "professional": "prof-001", "collected": ["service", "professional"]}
    try:
        response = httpx.post(f"{BASE_URL}/booking/validate", json=payload, timeout=10.0)
        response.raise_for_status()
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False

    data = response.json()
    print(f"valid={data['valid']}")
    for error in data["errors"]:
        print(f"  error: {error}")
    for suggestion in data["suggestions"]:
        print(f"  suggestion: {suggestion}")
    return not data["valid"]


def main():
    print("\n🚀 Testing Booking Assistant API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0).raise_for_status()
        print("✅ Server is running")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload --port 8001")
        sys.exit(1)

    session_id = str(uuid.uuid4())
    print("\n" + "=" * 60)
    print(f"Testing POST /chat (session {session_id})")
    print("=" * 60)
    for message in (
        "Quais serviços vocês oferecem?",
        "Quero agendar um corte com o Carlos",
        "cancelar",
    ):
        send_chat(session_id, message)

    check_validate()

    stats = httpx.get(f"{BASE_URL}/sessions/stats", timeout=5.0).json()
    print(f"\nActive sessions: {stats['total_sessions']}")

    print("\n" + "=" * 60)
    print("✅ Smoke run complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
