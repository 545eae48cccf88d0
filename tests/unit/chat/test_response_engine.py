import pytest

from shambago.chat_service.response_engine import (
    FALLBACK_TEMPLATE,
    RULES,
    generate_response,
    match_rule,
)

REPLIES = {rule.topic: rule.reply for rule in RULES}


def test_greeting_wins_over_weather():
    assert generate_response("Hello, what's the weather?") == REPLIES["greeting"]


@pytest.mark.parametrize(
    "message, topic",
    [
        ("HELLO there", "greeting"),
        ("Will the weather stay dry?", "weather"),
        ("My crop leaves are yellow", "crop"),
        ("When should I plant beans?", "crop"),
        ("Current market rates", "market"),
        ("Best price for maize", "market"),
        ("Soil test results", "soil"),
    ],
)
def test_keyword_topics(message, topic):
    assert match_rule(message).topic == topic
    assert generate_response(message) == REPLIES[topic]


def test_crop_checked_before_market():
    assert match_rule("crop market update").topic == "crop"


def test_fallback_echoes_input_verbatim():
    assert generate_response("xyz123") == FALLBACK_TEMPLATE.format(message="xyz123")
    assert "'xyz123'" in generate_response("xyz123")


def test_fallback_keeps_braces_and_case():
    reply = generate_response("Mbolea {DAP}?")
    assert "'Mbolea {DAP}?'" in reply


def test_response_is_deterministic():
    message = "Any news on soil?"
    assert generate_response(message) == generate_response(message)
