# scripts/seed_demo_conversation.py
"""
Seed a demo travel-planning conversation for a user.
Run: python scripts/seed_demo_conversation.py <user_id>
"""
from __future__ import annotations

import asyncio
import os
import sys
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from db.session import session_scope
from services.conversation_store import upsert_conversation
from services.webhook_payload import ConversationRecord

DEMO_TRANSCRIPT = [
    {
        "role": "user",
        "message": "Hi! I'm a student looking to plan a trip to Europe on a budget of $1500.",
    },
    {
        "role": "agent",
        "message": (
            "Great choice! Eastern European cities like Prague, Budapest, or Krakow "
            "offer rich culture and are very affordable. Want specific recommendations?"
        ),
    },
    {
        "role": "user",
        "message": "Yes! I'm particularly interested in Prague. What can you tell me about it?",
    },
    {
        "role": "agent",
        "message": (
            "Prague is perfect for students: hostels for $15-25/night, free walking tours, "
            "and about $40-50/day including accommodation."
        ),
    },
]


def build_demo_record(user_id: str) -> ConversationRecord:
    return ConversationRecord(
        user_id=user_id,
        conversation_id=f"demo_{int(time.time() * 1000)}",
        agent_id="demo_agent",
        status="completed",
        transcript=DEMO_TRANSCRIPT,
        analysis={
            "sentiment": "positive",
            "summary": "Student planning a European trip with $1500 budget, interested in Prague",
        },
        summary=(
            "Student is planning a budget trip to Europe with $1500. Discussed Prague as an "
            "affordable destination with hostel accommodations ($15-25/night), free activities, "
            "and estimated daily budget of $40-50."
        ),
    )


async def seed(user_id: str) -> None:
    record = build_demo_record(user_id)
    async with session_scope() as db:
        await upsert_conversation(db, record)
    print(f"Created demo conversation {record.conversation_id} for {user_id}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: seed_demo_conversation.py <user_id>")
    asyncio.run(seed(sys.argv[1]))
