"""Style sheets for the application's views.

Every view gets the shared base sheet followed by its own rules. Rules are
kept as data, a selector mapped to its declarations, and rendered to CSS text.
"""

from __future__ import annotations

from collections.abc import Mapping

Declarations = Mapping[str, str]
Rules = Mapping[str, Declarations]

_INDENT = "    "

BG_PRIMARY = "var(--bg-primary)"
BG_SECONDARY = "var(--bg-secondary)"
BG_TERTIARY = "var(--bg-tertiary)"
ACCENT = "var(--accent-primary)"
ACCENT_SECONDARY = "var(--accent-secondary)"
TEXT = "var(--text-primary)"
TEXT_MUTED = "var(--text-secondary)"
RADIUS = "var(--border-radius)"
DIVIDER = f"1px solid {BG_TERTIARY}"

_VAULT = "password"


def _render(rules: Rules) -> str:
    """Render selector/declaration mappings as CSS text."""
    blocks = []
    for selector, declarations in rules.items():
        body = "".join(
            f"{_INDENT}{prop}: {value};\n" for prop, value in declarations.items()
        )
        blocks.append(f"{selector} {{\n{body}}}")
    return "\n\n".join(blocks) + "\n"


_FLEX = {"display": "flex"}
_COLUMN = {**_FLEX, "flex-direction": "column"}
_CENTERED = {"align-items": "center"}
_SPREAD = {**_FLEX, "justify-content": "space-between", **_CENTERED}
_PLAIN_BUTTON = {"border": "none", "cursor": "pointer"}
_ON_ACCENT = {"background-color": ACCENT, "color": BG_PRIMARY}
_DISABLED = {"opacity": "0.5", "cursor": "not-allowed"}
_LABEL = {"font-weight": "bold", "color": TEXT_MUTED}
_THIN_SCROLL = {
    "scrollbar-width": "thin",
    "scrollbar-color": f"{ACCENT} {BG_TERTIARY}",
}


def _row(gap: str) -> dict[str, str]:
    return {**_FLEX, "gap": gap}


def _stack(gap: str) -> dict[str, str]:
    return {**_COLUMN, "gap": gap}


def _panel(**extra: str) -> dict[str, str]:
    """Full-height column layout shared by the main views."""
    declarations = {
        **_COLUMN,
        "height": "95vh",
        "max-height": "95vh",
        "overflow": "hidden",
        "background-color": BG_PRIMARY,
    }
    declarations.update({key.replace("_", "-"): value for key, value in extra.items()})
    return declarations


def _scroll_column() -> dict[str, str]:
    """Scrolling message or e-mail list."""
    return {
        "flex": "1 1 auto",
        "padding": "1rem",
        "overflow-y": "auto",
        **_stack("0.75rem"),
        **_THIN_SCROLL,
    }


def _scrollbar(selector: str) -> dict[str, dict[str, str]]:
    """Thin accent-coloured scrollbar rules for WebKit."""
    return {
        f"{selector}::-webkit-scrollbar": {"width": "6px"},
        f"{selector}::-webkit-scrollbar-track": {"background": BG_TERTIARY},
        f"{selector}::-webkit-scrollbar-thumb": {
            "background-color": ACCENT,
            "border-radius": "3px",
        },
    }


def _small_button(background: str) -> dict[str, str]:
    return {"background-color": background, "color": BG_PRIMARY}


_THEME = {
    "--bg-primary": "#121212",
    "--bg-secondary": "#1e1e1e",
    "--bg-tertiary": "#2d2d2d",
    "--accent-primary": "#bb86fc",
    "--accent-secondary": "#03dac6",
    "--text-primary": "#e1e1e1",
    "--text-secondary": "#a1a1a1",
    "--border-radius": "8px",
    "--sidebar-width": "240px",
}

_BASE_RULES: Rules = {
    ":root": _THEME,
    "body": {
        "background-color": BG_PRIMARY,
        "color": TEXT,
        "font-family": "'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif",
        "margin": "0",
        "padding": "0",
        "min-height": "100vh",
    },
    ".app-container": {**_FLEX, "min-height": "100vh"},
    "main": {
        "flex": "1",
        "padding": "30px",
        "background-color": BG_PRIMARY,
        "overflow-y": "auto",
    },
    ".card": {
        "background-color": BG_SECONDARY,
        "border-radius": RADIUS,
        "padding": "20px",
        "margin-bottom": "20px",
        "box-shadow": "0 2px 8px rgba(0, 0, 0, 0.2)",
    },
    "h1, h2, h3": {"color": TEXT, "margin-top": "0"},
    "h1": {"font-size": "2rem", "margin-bottom": "24px"},
    ".welcome-message": {
        **_COLUMN,
        "align-items": "flex-start",
        "text-align": "left",
        "padding": "20px 0",
    },
    ".welcome-message h1": {"font-size": "2.5rem", "margin-bottom": "16px"},
    ".welcome-message p": {
        "color": TEXT_MUTED,
        "max-width": "600px",
        "font-size": "1.1rem",
        "line-height": "1.6",
        "margin-bottom": "24px",
    },
    ".accent": {"color": ACCENT},
    ".btn": {
        **_ON_ACCENT,
        "border": "none",
        "padding": "10px 20px",
        "border-radius": RADIUS,
        "font-weight": "600",
        "cursor": "pointer",
        "transition": "all 0.2s ease",
    },
    ".btn:hover": {"opacity": "0.9", "transform": "translateY(-1px)"},
}

_CHAT_RULES: Rules = {
    ".chat-container": _panel(),
    ".chat-messages": {**_scroll_column(), "overscroll-behavior": "contain"},
    **_scrollbar(".chat-messages"),
    ".message": {
        "max-width": "80%",
        "min-width": "120px",
        "padding": "0.75rem 1rem",
        "border-radius": "1rem",
        "position": "relative",
        "word-wrap": "break-word",
        "overflow-wrap": "break-word",
    },
    ".message.user": {
        "align-self": "flex-end",
        **_ON_ACCENT,
        "margin-left": "auto",
        "border-bottom-right-radius": "0.25rem",
    },
    ".message.assistant": {
        "align-self": "flex-start",
        "background-color": BG_TERTIARY,
        "margin-right": "auto",
        "border-bottom-left-radius": "0.25rem",
    },
    ".message-timestamp": {
        "font-size": "0.65rem",
        "opacity": "0.7",
        "margin-top": "0.25rem",
        "text-align": "right",
    },
    ".chat-input": {
        **_row("0.75rem"),
        "padding": "1rem",
        "position": "sticky",
        "bottom": "-2",
    },
    ".chat-input input": {
        "flex": "1",
        "padding": "1rem 1rem",
        "border": "none",
        "border-radius": "1.5rem",
        "background-color": BG_TERTIARY,
        "color": TEXT,
        "max-height": "50px",
        "font-size": "16px",
    },
    ".send-button": {
        "padding": "0 1.25rem",
        "border-radius": "1.5rem",
        **_ON_ACCENT,
        **_PLAIN_BUTTON,
        "min-width": "80px",
        "max-height": "50px",
    },
    "body": {"overflow": "hidden", "margin": "0", "padding": "0"},
}

_EMAIL_RULES: Rules = {
    ".email-container": _panel(),
    ".email-header": {
        "padding": "1rem",
        "font-size": "1.5rem",
        "font-weight": "bold",
        "background-color": BG_TERTIARY,
        "color": TEXT,
        "text-align": "center",
    },
    ".email-tabs": {**_FLEX, "border-bottom": DIVIDER},
    ".tab-button": {
        "flex": "1",
        "padding": "1rem",
        "border": "none",
        "background-color": BG_PRIMARY,
        "color": TEXT,
        "cursor": "pointer",
        "font-size": "1rem",
    },
    ".tab-button.active": {**_ON_ACCENT, "font-weight": "bold"},
    ".email-list": _scroll_column(),
    **_scrollbar(".email-list"),
    ".email-item": {
        "padding": "1rem",
        "border-radius": "0.5rem",
        "background-color": BG_TERTIARY,
        "cursor": "pointer",
        "transition": "transform 0.2s",
    },
    ".email-item:hover": {"transform": "translateY(-2px)"},
    ".email-meta": {
        **_FLEX,
        "justify-content": "space-between",
        "margin-bottom": "0.5rem",
        "font-size": "0.9rem",
    },
    ".email-sender": {"font-weight": "bold"},
    ".email-time": {"opacity": "0.7"},
    ".email-subject": {"font-weight": "bold", "margin-bottom": "0.25rem"},
    ".email-preview": {
        "opacity": "0.8",
        "font-size": "0.9rem",
        "white-space": "nowrap",
        "overflow": "hidden",
        "text-overflow": "ellipsis",
    },
}

_NAVBAR_RULES: Rules = {
    "nav": {
        "width": "var(--sidebar-width)",
        "background-color": BG_SECONDARY,
        **_COLUMN,
        "box-shadow": "2px 0 10px rgba(0, 0, 0, 0.3)",
        "justify-content": "space-between",
    },
    ".nav-main": {"padding": "20px 0"},
    ".nav-footer": {"padding": "20px 0", "border-top": DIVIDER},
    ".nav-header": {
        "padding": "0 20px 20px",
        "margin-bottom": "10px",
        "border-bottom": DIVIDER,
    },
    ".nav-header h2": {"margin": "0", "color": ACCENT},
    "nav a": {
        "color": TEXT,
        "text-decoration": "none",
        "padding": "12px 20px",
        "margin": "4px 10px",
        "border-radius": RADIUS,
        "transition": "all 0.2s ease",
        "font-weight": "500",
        **_FLEX,
        **_CENTERED,
    },
    "nav a:hover": {"background-color": BG_TERTIARY, "color": ACCENT},
    "nav a.active": {**_ON_ACCENT, "font-weight": "600"},
    "nav a i": {"margin-right": "10px", "width": "20px", "text-align": "center"},
    ".nav-cards": {"margin-top": "20px", "padding": "0 10px", **_stack("12px")},
    ".nav-cards .card": {
        "background": f"linear-gradient(145deg, {BG_TERTIARY}, {BG_SECONDARY})",
        "border-radius": RADIUS,
        "padding": "16px",
        "border": "1px solid rgba(255, 255, 255, 0.05)",
        "box-shadow": (
            "0 4px 6px rgba(0, 0, 0, 0.1), inset 0 1px 0 rgba(255, 255, 255, 0.02)"
        ),
        "transition": "all 0.3s ease",
        "position": "relative",
        "overflow": "hidden",
    },
    ".nav-cards .card::before": {
        "content": "''",
        "position": "absolute",
        "top": "0",
        "left": "0",
        "width": "3px",
        "height": "100%",
        "background": f"linear-gradient(to bottom, {ACCENT}, {ACCENT_SECONDARY})",
    },
    ".nav-cards .card:hover": {
        "transform": "translateY(-2px)",
        "box-shadow": (
            "0 6px 12px rgba(0, 0, 0, 0.15), inset 0 1px 0 rgba(255, 255, 255, 0.03)"
        ),
    },
    ".nav-cards h2": {
        "font-size": "0.95rem",
        "margin-bottom": "8px",
        "color": ACCENT_SECONDARY,
        "font-weight": "600",
    },
    ".nav-cards p": {
        "font-size": "0.85rem",
        "color": TEXT_MUTED,
        "line-height": "1.5",
        "margin": "0",
    },
}

_VAULT_RULES: Rules = {
    f".{_VAULT}-manager-container": _panel(color=TEXT),
    ".pm-header": {
        **_SPREAD,
        "padding": "1rem",
        "background-color": BG_SECONDARY,
        "font-size": "1.25rem",
        "font-weight": "bold",
        "border-bottom": DIVIDER,
    },
    ".pm-controls": _row("0.75rem"),
    ".pm-search": {
        "padding": "0.5rem 1rem",
        "border-radius": "1.5rem",
        "border": "none",
        "background-color": BG_TERTIARY,
        "color": TEXT,
        "min-width": "200px",
    },
    ".pm-add-button": {
        "padding": "0.5rem 1rem",
        "border-radius": "1.5rem",
        **_ON_ACCENT,
        **_PLAIN_BUTTON,
        "font-weight": "bold",
    },
    ".pm-list": {
        "flex": "1",
        "padding": "1rem",
        "overflow-y": "auto",
        **_stack("1rem"),
    },
    ".pm-empty-state": {
        **_FLEX,
        "justify-content": "center",
        **_CENTERED,
        "height": "100%",
        "color": TEXT_MUTED,
        "font-style": "italic",
    },
    ".pm-entry": {
        "background-color": BG_TERTIARY,
        "border-radius": "0.75rem",
        "padding": "1rem",
        "box-shadow": "0 2px 4px rgba(0, 0, 0, 0.1)",
    },
    ".pm-entry-header": {**_SPREAD, "margin-bottom": "0.75rem"},
    ".pm-entry-name": {"font-weight": "bold", "font-size": "1.1rem"},
    ".pm-entry-actions": _row("0.5rem"),
    ".pm-copy-button, .pm-edit-button, .pm-delete-button": {
        "padding": "0.25rem 0.5rem",
        "border-radius": "0.5rem",
        **_PLAIN_BUTTON,
        "font-size": "0.8rem",
    },
    ".pm-copy-button": _small_button(ACCENT_SECONDARY),
    ".pm-edit-button": _small_button("var(--accent-tertiary)"),
    ".pm-delete-button": _small_button("var(--error)"),
    ".pm-entry-details": _stack("0.5rem"),
    ".pm-detail": _row("0.5rem"),
    ".pm-detail-label": _LABEL,
    ".pm-detail-value": {"word-break": "break-all"},
    ".pm-entry-footer": {
        "margin-top": "0.75rem",
        "font-size": "0.8rem",
        "color": TEXT_MUTED,
    },
    ".pm-form-overlay": {
        "position": "fixed",
        **{side: "0" for side in ("top", "left", "right", "bottom")},
        "background-color": "rgba(0, 0, 0, 0.5)",
        **_FLEX,
        "justify-content": "center",
        **_CENTERED,
        "z-index": "1000",
    },
    ".pm-form-container": {
        "background-color": BG_SECONDARY,
        "border-radius": "1rem",
        "padding": "1.5rem",
        "width": "90%",
        "max-width": "500px",
        "box-shadow": "0 4px 8px rgba(0, 0, 0, 0.2)",
    },
    ".pm-form-header": {
        "font-size": "1.25rem",
        "font-weight": "bold",
        "margin-bottom": "1.5rem",
        "text-align": "center",
    },
    ".pm-form": _stack("1rem"),
    ".pm-form-group": _stack("0.5rem"),
    ".pm-form-group label": _LABEL,
    ".pm-form-group input": {
        "padding": "0.75rem",
        "border-radius": "0.5rem",
        "border": DIVIDER,
        "background-color": BG_PRIMARY,
        "color": TEXT,
    },
    f".pm-{_VAULT}-input": _row("0.5rem"),
    f".pm-{_VAULT}-input input": {"flex": "1"},
    f".pm-toggle-{_VAULT}": {
        "padding": "0 0.75rem",
        "border-radius": "0.5rem",
        "background-color": BG_TERTIARY,
        **_PLAIN_BUTTON,
    },
    ".pm-form-actions": {
        **_FLEX,
        "justify-content": "flex-end",
        "gap": "0.75rem",
        "margin-top": "1rem",
    },
    ".pm-cancel-button": {
        "padding": "0.75rem 1.5rem",
        "border-radius": "0.5rem",
        "background-color": BG_TERTIARY,
        **_PLAIN_BUTTON,
    },
    ".pm-save-button": {
        "padding": "0.75rem 1.5rem",
        "border-radius": "0.5rem",
        **_ON_ACCENT,
        **_PLAIN_BUTTON,
        "font-weight": "bold",
    },
    ".pm-save-button:disabled": _DISABLED,
}

_TODO_RULES: Rules = {
    ".todo-container": _panel(color=TEXT),
    ".todo-header": {
        "padding": "1rem",
        "font-size": "1.5rem",
        "font-weight": "bold",
        "border-bottom": DIVIDER,
        "text-align": "center",
    },
    ".todo-input-container": {
        **_row("0.75rem"),
        "padding": "1rem",
        "border-bottom": DIVIDER,
    },
    ".todo-input-container input": {
        "flex": "1",
        "padding": "0.75rem 1rem",
        "border": "none",
        "border-radius": "0.5rem",
        "background-color": BG_TERTIARY,
        "color": TEXT,
        "font-size": "1rem",
    },
    ".add-button": {
        "padding": "0 1.25rem",
        "border-radius": "0.5rem",
        **_ON_ACCENT,
        **_PLAIN_BUTTON,
    },
    ".add-button:disabled": _DISABLED,
    ".todo-filters": {
        **_FLEX,
        "justify-content": "center",
        "gap": "0.5rem",
        "padding": "0.75rem",
        "border-bottom": DIVIDER,
    },
    ".filter-button": {
        "padding": "0.5rem 1rem",
        "border": "none",
        "background": "none",
        "color": TEXT_MUTED,
        "cursor": "pointer",
        "border-radius": "0.25rem",
    },
    ".filter-button.active": {"color": ACCENT, "font-weight": "bold"},
    ".todo-items": {
        "flex": "1",
        "overflow-y": "auto",
        "padding": "0.5rem",
        **_THIN_SCROLL,
    },
    **_scrollbar(".todo-items"),
    ".todo-item": {
        **_FLEX,
        **_CENTERED,
        "gap": "0.75rem",
        "padding": "0.75rem 1rem",
        "margin-bottom": "0.5rem",
        "border-radius": "0.5rem",
        "background-color": BG_SECONDARY,
        "transition": "all 0.2s ease",
    },
    ".todo-item.completed": {"opacity": "0.7"},
    ".todo-checkbox": {
        "width": "1.25rem",
        "height": "1.25rem",
        "border": f"2px solid {ACCENT}",
        "border-radius": "0.25rem",
        **_FLEX,
        **_CENTERED,
        "justify-content": "center",
        "cursor": "pointer",
    },
    ".todo-text": {"flex": "1", "word-break": "break-word"},
    ".todo-item.completed .todo-text": {
        "text-decoration": "line-through",
        "color": TEXT_MUTED,
    },
    ".todo-delete": {
        "opacity": "0",
        "cursor": "pointer",
        "transition": "opacity 0.2s ease",
    },
    ".todo-item:hover .todo-delete": {"opacity": "1"},
    ".todo-time": {"font-size": "0.75rem", "color": TEXT_MUTED},
    ".todo-stats": {
        "padding": "0.75rem",
        "text-align": "center",
        "color": TEXT_MUTED,
        "border-top": DIVIDER,
    },
}

BASE_CSS = _render(_BASE_RULES)
CHAT_CSS = _render(_CHAT_RULES)
EMAIL_CSS = _render(_EMAIL_RULES)
NAVBAR_CSS = _render(_NAVBAR_RULES)
VAULT_CSS = _render(_VAULT_RULES)
TODO_CSS = _render(_TODO_RULES)


def _with_base(sheet: str) -> str:
    return f"{BASE_CSS}\n{sheet}"


def chat_styles() -> str:
    """Return the style sheet for the chat view."""
    return _with_base(CHAT_CSS)


def email_styles() -> str:
    """Return the style sheet for the e-mail view."""
    return _with_base(EMAIL_CSS)


def navbar_styles() -> str:
    """Return the style sheet for the navigation sidebar."""
    return _with_base(NAVBAR_CSS)


def password_manager_styles() -> str:
    """Return the style sheet for the credential manager view."""
    return _with_base(VAULT_CSS)


def todo_styles() -> str:
    """Return the style sheet for the to-do view."""
    return _with_base(TODO_CSS)