"""E-mail view: a sample inbox sorted into tabs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from html import escape

from mia.styles import email_styles


@dataclass(frozen=True)
class Email:
    """One message in the inbox."""

    sender: str
    subject: str
    preview: str
    is_important: bool
    is_spam: bool
    timestamp: datetime


class EmailTab(Enum):
    """The tabs the inbox is split into."""

    IMPORTANT = "important"
    REGULAR = "regular"
    SPAM = "spam"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def matches(self, email: Email) -> bool:
        if self is EmailTab.IMPORTANT:
            return email.is_important
        if self is EmailTab.REGULAR:
            return not email.is_important and not email.is_spam
        return email.is_spam


def generate_emails(now: datetime | None = None) -> list[Email]:
    """Return the sample inbox, with times relative to ``now``."""
    now = now or datetime.now().astimezone()
    return [
        Email(
            "John Doe",
            "Meeting Tomorrow",
            "Hi, just a reminder about our meeting tomorrow at 10 AM...",
            True,
            False,
            now - timedelta(hours=2),
        ),
        Email(
            "Amazon",
            "Your Order Has Shipped",
            "Your recent order #12345 has been shipped and will arrive...",
            False,
            False,
            now - timedelta(hours=5),
        ),
        Email(
            "Prize Committee",
            "You've Won $1,000,000!",
            "Congratulations! You've been selected as our grand prize winner...",
            False,
            True,
            now - timedelta(hours=10),
        ),
        Email(
            "Sarah Smith",
            "Project Update",
            "Here's the latest update on the project we're working on...",
            True,
            False,
            now - timedelta(days=1),
        ),
        Email(
            "Newsletter",
            "Weekly Digest",
            "Here's what's new this week in our community...",
            False,
            False,
            now - timedelta(days=2),
        ),
    ]


class EmailClient:
    """State of the e-mail view: the inbox and the selected tab."""

    def __init__(self, now: datetime | None = None) -> None:
        self.emails = generate_emails(now)
        self.active_tab = EmailTab.IMPORTANT

    def select_tab(self, tab: EmailTab | str) -> None:
        """Switch to a tab, given as an EmailTab or its name; unknown names raise ValueError."""
        self.active_tab = EmailTab(tab)

    def visible_emails(self) -> list[Email]:
        """Return the e-mails shown under the selected tab, in inbox order."""
        return [email for email in self.emails if self.active_tab.matches(email)]

    def _render_tab(self, tab: EmailTab) -> str:
        css = "tab-button active" if tab is self.active_tab else "tab-button"
        return f'<button class="{css}">{tab.label}</button>'

    @staticmethod
    def _render_email(email: Email) -> str:
        return (
            '<div class="email-item">'
            '<div class="email-meta">'
            f'<div class="email-sender">{escape(email.sender)}</div>'
            f'<div class="email-time">{email.timestamp.strftime("%H:%M")}</div>'
            "</div>"
            f'<div class="email-subject">{escape(email.subject)}</div>'
            f'<div class="email-preview">{escape(email.preview)}</div>'
            "</div>"
        )

    def render(self) -> str:
        """Return the view as HTML."""
        tabs = "".join(self._render_tab(tab) for tab in EmailTab)
        items = "".join(self._render_email(e) for e in self.visible_emails())
        return (
            f"<style>{email_styles()}</style>"
            '<div class="email-container">'
            '<div class="email-header">Email Client</div>'
            f'<div class="email-tabs">{tabs}</div>'
            f'<div class="email-list">{items}</div>'
            "</div>"
        )