import pytest

from mia import styles


def _brace_depths(sheet):
    """Return the lowest nesting depth reached and the depth at the end."""
    depth = 0
    lowest = 0
    for char in sheet:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        lowest = min(lowest, depth)
    return lowest, depth


def test_chat_sheet_is_base_then_own_rules():
    assert styles.chat_styles() == styles.BASE_CSS + "\n" + styles.CHAT_CSS


def test_email_sheet_is_base_then_own_rules():
    assert styles.email_styles() == styles.BASE_CSS + "\n" + styles.EMAIL_CSS


def test_navbar_sheet_is_base_then_own_rules():
    assert styles.navbar_styles() == styles.BASE_CSS + "\n" + styles.NAVBAR_CSS


def test_password_manager_sheet_is_base_then_own_rules():
    sheet = styles.password_manager_styles()
    prefix = styles.BASE_CSS + "\n"
    assert sheet.startswith(prefix)
    own_rules = sheet[len(prefix):]
    assert ".password-manager-container {" in own_rules
    assert ".pm-entry {" in own_rules
    assert ":root" not in own_rules


def test_todo_sheet_is_base_then_own_rules():
    assert styles.todo_styles() == styles.BASE_CSS + "\n" + styles.TODO_CSS


@pytest.mark.parametrize(
    "build",
    [
        styles.chat_styles,
        styles.email_styles,
        styles.navbar_styles,
        styles.password_manager_styles,
        styles.todo_styles,
    ],
)
def test_braces_balance_in_every_sheet(build):
    assert _brace_depths(build()) == (0, 0)


def test_sheets_are_stable():
    styles.chat_styles()
    assert styles.chat_styles() == styles.BASE_CSS + "\n" + styles.CHAT_CSS
    styles.todo_styles()
    assert styles.todo_styles() == styles.BASE_CSS + "\n" + styles.TODO_CSS
    styles.navbar_styles()
    assert styles.navbar_styles() == styles.BASE_CSS + "\n" + styles.NAVBAR_CSS


def test_every_sheet_defines_theme_variables():
    for sheet in (
        styles.chat_styles(),
        styles.email_styles(),
        styles.navbar_styles(),
        styles.password_manager_styles(),
        styles.todo_styles(),
    ):
        assert "--bg-primary: #121212;" in sheet
        assert "--accent-primary: #bb86fc;" in sheet
        assert "--sidebar-width: 240px;" in sheet


def test_rule_is_rendered_as_block():
    assert ".accent {\n    color: var(--accent-primary);\n}" in styles.chat_styles()
    assert ".todo-item.completed {\n    opacity: 0.7;\n}" in styles.todo_styles()


@pytest.mark.parametrize(
    "selector",
    [".chat-container", ".message.user", ".send-button",
     ".chat-messages::-webkit-scrollbar-thumb"],
)
def test_chat_sheet_contains_selector(selector):
    assert selector + " {" in styles.chat_styles()


@pytest.mark.parametrize("selector", [".tab-button.active", ".email-preview"])
def test_email_sheet_contains_selector(selector):
    assert selector + " {" in styles.email_styles()


@pytest.mark.parametrize("selector", ["nav a.active", ".nav-cards .card::before"])
def test_navbar_sheet_contains_selector(selector):
    assert selector + " {" in styles.navbar_styles()


@pytest.mark.parametrize("selector", [".pm-save-button:disabled", ".pm-form-overlay"])
def test_password_manager_sheet_contains_selector(selector):
    assert selector + " {" in styles.password_manager_styles()


@pytest.mark.parametrize(
    "selector", [".todo-item.completed .todo-text", ".add-button:disabled"]
)
def test_todo_sheet_contains_selector(selector):
    assert selector + " {" in styles.todo_styles()


def test_sheets_differ_from_each_other():
    built = {
        styles.chat_styles(),
        styles.email_styles(),
        styles.navbar_styles(),
        styles.password_manager_styles(),
        styles.todo_styles(),
    }
    assert len(built) == 5


def test_component_rules_stay_in_their_own_sheet():
    assert ".todo-container" not in styles.chat_styles()
    assert ".chat-container" not in styles.todo_styles()
    assert ".pm-entry" not in styles.email_styles()


def test_panels_share_full_height_layout():
    for sheet in (styles.chat_styles(), styles.email_styles(), styles.todo_styles()):
        assert "height: 95vh;" in sheet
        assert "max-height: 95vh;" in sheet