"""Chat view: a conversation with the assistant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import Callable

from mia.styles import chat_styles

GREETING = "Hello! I'm Mia. How can I help you today?"
ENTER = "Enter"

_SEND_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="24" '
    'height="24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M22 2L11 13M22 2l-7 20-4-9-9-4 20-7z"></path></svg>'
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Message:
    """One message in the conversation."""

    text: str
    is_user: bool
    timestamp: datetime

    @property
    def author(self) -> str:
        return "You" if self.is_user else "Mia"

    @property
    def css_class(self) -> str:
        return "message user" if self.is_user else "message assistant"


def get_ai_response(text: str) -> str:
    """Return the assistant's reply to a user message."""
    return f"I received your message: '{text}'. This is a simulated response."


class Chat:
    """State of the chat view: the messages and the text being typed."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _local_now
        self.messages: list[Message] = [Message(GREETING, False, self._clock())]
        self.input_text = ""

    def press_key(self, key: str) -> bool:
        """Handle a key press in the input; Enter sends. Return whether a message was sent."""
        if key == ENTER and self.input_text:
            self.send()
            return True
        return False

    def send(self) -> Message | None:
        """Send the typed text and add the reply; return the reply, or None if nothing was typed."""
        if not self.input_text:
            return None
        user_text = self.input_text
        self.messages.append(Message(user_text, True, self._clock()))
        reply = Message(get_ai_response(user_text), False, self._clock())
        self.messages.append(reply)
        self.input_text = ""
        return reply

    def _render_message(self, message: Message) -> str:
        return (
            f'<div class="{message.css_class}">'
            f'<div class="message-meta">{message.author}'
            f'<span class="message-time">{message.timestamp.strftime("%H:%M")}</span>'
            f"</div>"
            f'<div class="message-content">{escape(message.text)}</div>'
            f"</div>"
        )

    def render(self) -> str:
        """Return the view as HTML."""
        messages = "".join(self._render_message(m) for m in self.messages)
        disabled = " disabled" if not self.input_text else ""
        return (
            f"<style>{chat_styles()}</style>"
            '<div class="chat-container">'
            '<div class="chat-header">Mia AI Assistant</div>'
            f'<div class="chat-messages">{messages}</div>'
            '<div class="chat-input-container">'
            '<div class="chat-input">'
            f'<input type="text" value="{escape(self.input_text)}" '
            'placeholder="Type your message...">'
            f'<button class="send-button"{disabled}>{_SEND_ICON}</button>'
            "</div>"
            '<div class="chat-hint">Press Enter to send, Shift+Enter for new line</div>'
            "</div>"
            "</div>"
        )