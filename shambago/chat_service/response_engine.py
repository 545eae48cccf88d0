"""
Keyword response engine for chat support.

Picks a canned reply by scanning the message for keywords. Rules are
checked in order and the first match wins, so a message mentioning
both a greeting and the weather gets the greeting.
"""

from typing import NamedTuple, Tuple


class KeywordRule(NamedTuple):
    topic: str
    keywords: Tuple[str, ...]
    reply: str


RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(
        "greeting",
        ("hello", "hi"),
        "Hello! How can I assist you with your farming needs today?",
    ),
    KeywordRule(
        "weather",
        ("weather",),
        "I can help you check weather conditions and set up alerts. "
        "What specific information would you like to know?",
    ),
    KeywordRule(
        "crop",
        ("crop", "plant"),
        "I can provide information about crop management, disease detection, "
        "and growing tips. What would you like to learn more about?",
    ),
    KeywordRule(
        "market",
        ("market", "price"),
        "I can help you check current market prices and connect with buyers. "
        "Would you like to see the latest market trends?",
    ),
    KeywordRule(
        "soil",
        ("soil",),
        "I can help you monitor soil health and provide recommendations for "
        "improvement. Would you like to check your soil analysis?",
    ),
)

FALLBACK_TEMPLATE = (
    "I understand you're asking about '{message}'. "
    "Could you please provide more details so I can better assist you?"
)


def match_rule(message: str) -> KeywordRule | None:
    """
    Return the first rule whose keywords occur in the message.
    """
    lowered = message.lower()

    for rule in RULES:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule

    return None


def generate_response(message: str) -> str:
    """
    Map a user message to a canned reply.

    Args:
        message: Raw user message.

    Returns:
        str: Reply of the first matching rule, or the fallback with
        the message echoed verbatim.
    """
    rule = match_rule(message)
    if rule is not None:
        return rule.reply

    return FALLBACK_TEMPLATE.format(message=message)
