# ai/prompt_builder.py
"""
Assembles the recommendations request from the travel-expert system
prompt, the conversation summary, and the expected JSON schema.
"""
from __future__ import annotations

from dataclasses import dataclass

from ai.prompts.travel_expert import RESPONSE_SCHEMA, TRAVEL_EXPERT


@dataclass
class RecommendationPromptContext:
    conversation_summary: str
    activity_count: int = 5
    hotel_count: int = 3
    restaurant_count: int = 3


def build_system_prompt() -> str:
    return TRAVEL_EXPERT


def build_user_prompt(ctx: RecommendationPromptContext) -> str:
    """Build the user message carrying the summary and the output contract."""
    sections: list[str] = []

    # 1. What the student talked about
    sections.append(f'Conversation Summary: "{ctx.conversation_summary.strip()}"')

    # 2. Shape of the answer
    sections.append(
        "Please provide specific recommendations in valid JSON format "
        f"with the following structure:\n{RESPONSE_SCHEMA}"
    )

    # 3. How many of each
    sections.append(
        f"Provide {ctx.activity_count} activities, {ctx.hotel_count} hotels "
        f"(including budget options), and {ctx.restaurant_count} restaurants "
        "that match the user's budget and preferences mentioned in the conversation."
    )

    return "\n\n".join(sections)
