from datetime import datetime

import pytest

from mia.chat import GREETING, Chat, Message, get_ai_response

FIXED = datetime(2024, 1, 2, 9, 30)


@pytest.fixture
def chat():
    return Chat(clock=lambda: FIXED)


def test_starts_with_greeting(chat):
    assert chat.messages == [Message(GREETING, False, FIXED)]
    assert chat.input_text == ""


def test_ai_response_text():
    assert (
        get_ai_response("hi")
        == "I received your message: 'hi'. This is a simulated response."
    )


def test_send_appends_user_message_and_reply(chat):
    chat.input_text = "hello"
    reply = chat.send()
    assert reply == Message(get_ai_response("hello"), False, FIXED)
    assert chat.messages[1] == Message("hello", True, FIXED)
    assert chat.messages[2] == reply
    assert len(chat.messages) == 3
    assert chat.input_text == ""


def test_send_with_empty_input_does_nothing(chat):
    assert chat.send() is None
    assert len(chat.messages) == 1


def test_enter_sends(chat):
    chat.input_text = "ping"
    assert chat.press_key("Enter") is True
    assert [m.text for m in chat.messages[1:]] == ["ping", get_ai_response("ping")]


def test_other_keys_do_not_send(chat):
    chat.input_text = "ping"
    assert chat.press_key("a") is False
    assert len(chat.messages) == 1
    assert chat.input_text == "ping"


def test_enter_with_empty_input_does_not_send(chat):
    assert chat.press_key("Enter") is False
    assert len(chat.messages) == 1


def test_message_author_and_class():
    user = Message("x", True, FIXED)
    bot = Message("y", False, FIXED)
    assert (user.author, user.css_class) == ("You", "message user")
    assert (bot.author, bot.css_class) == ("Mia", "message assistant")


def test_render_shows_messages_and_time(chat):
    chat.input_text = "<b>"
    chat.send()
    html = chat.render()
    assert "Mia AI Assistant" in html
    assert GREETING.replace("'", "&#x27;") in html
    assert "&lt;b&gt;" in html
    assert "<b>" not in html.split("</style>", 1)[1]
    assert "09:30" in html
    assert html.count('class="message user"') == 1
    assert html.count('class="message assistant"') == 2


def test_render_disables_button_only_when_empty(chat):
    assert 'class="send-button" disabled' in chat.render()
    chat.input_text = "typing"
    assert 'class="send-button" disabled' not in chat.render()