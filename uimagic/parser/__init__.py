from .intent_parser import IntentParser

__all__ = ["IntentParser"]
