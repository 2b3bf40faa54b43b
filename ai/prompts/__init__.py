# ai/prompts/__init__.py
from ai.prompts.travel_expert import RESPONSE_SCHEMA, TRAVEL_EXPERT

__all__ = ["TRAVEL_EXPERT", "RESPONSE_SCHEMA"]
