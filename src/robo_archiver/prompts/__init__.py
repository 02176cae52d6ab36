"""Interactive prompts for operator-supplied metadata."""

from .operator import TOPIC_COUNT, OperatorPrompts, load_topics

__all__ = ["OperatorPrompts", "TOPIC_COUNT", "load_topics"]
