# mia

Mia is a small personal-assistant toolkit. It keeps the state of three views
(a chat with Mia, a to-do list and an inbox) and renders each view as an
HTML string. Each rendered view starts with a `<style>` element that holds
the view's stylesheet. Stylesheets for a navigation sidebar and a credential
manager are also provided. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `mia.chat`

- `Message` is a frozen dataclass with the fields `text`, `is_user` and
  `timestamp`. Its `author` property is `"You"` or `"Mia"`.
- `get_ai_response(text)` returns
  `"I received your message: '<text>'. This is a simulated response."`
- `Chat(clock=None)` starts with Mia's greeting as its only message and an
  empty `input_text`. The optional `clock` is a callable that returns the
  time stamp for each message. Without it, the local time is used.
  - `send()` does nothing and returns `None` when `input_text` is empty.
    Otherwise it appends the user's message and then Mia's reply, clears
    `input_text`, and returns the reply `Message`.
  - `press_key(key)` sends the message when `key == "Enter"` and there is
    text. It returns whether a message was sent.
  - `render()` returns the view as HTML.

### `mia.todo`

- `TodoItem` is a dataclass with the fields `id`, `text`, `completed` and
  `created_at`.
- `TodoFilter` is an enum with the members `ALL`, `ACTIVE` and `COMPLETED`.
- `TodoList(clock=None)` starts with two tasks, one open and one done. The
  attribute `new_todo_text` is empty and `filter` is `TodoFilter.ALL`.
  - `add()` adds `new_todo_text` as a new task whose id is one more than the
    highest id in the list. It then clears the text and returns the new item.
    When there is no text it returns `None`.
  - `press_key(key)` adds the task on `"Enter"`. It returns whether a task was
    added.
  - `toggle(todo_id)` flips whether the task is done and returns the task. It
    returns `None` when no task has that id.
  - `delete(todo_id)` removes the task with that id.
  - `visible()` returns the tasks that the current `filter` shows.
  - `items_left()` returns the number of tasks not yet done.
  - `render()` returns the view as HTML.

### `mia.inbox`

- `Email` is a frozen dataclass with the fields `sender`, `subject`,
  `preview`, `is_important`, `is_spam` and `timestamp`.
- `EmailTab` is an enum with the members `IMPORTANT`, `REGULAR` and `SPAM`.
  Regular means neither important nor spam.
- `generate_emails(now=None)` returns five sample e-mails. Their times are
  set relative to `now`.
- `EmailClient(now=None)` holds those e-mails, and its `active_tab` starts at
  `EmailTab.IMPORTANT`.
  - `select_tab(tab)` accepts an `EmailTab` or its value (`"important"`,
    `"regular"` or `"spam"`). Any other value raises `ValueError`.
  - `visible_emails()` returns the e-mails in the selected tab, in inbox
    order.
  - `render()` returns the view as HTML.

### `mia.greeting`

- `greet(name)` returns `"Hello, <name>! You've been greeted from Python!"`.

### `mia.styles`

- `chat_styles()`, `email_styles()`, `navbar_styles()`,
  `password_manager_styles()` and `todo_styles()` each return the shared base
  stylesheet (`BASE_CSS`), a newline, and then the stylesheet for that view.

## Example

```python
from mia.todo import TodoList

todos = TodoList()
todos.new_todo_text = "Write the report"
todos.add()
print(todos.items_left())  # 2
```

## What the package does not do

- It does not open a window and does not serve pages. `render()` only returns
  HTML strings. Nothing routes between the views.
- It has styles for a navigation sidebar and a credential manager, but no
  state or markup for them. No passwords are stored.
- Mia's chat replies are canned echoes, not generated answers.
- The inbox holds fixed sample data. It does not send or fetch mail.
- Nothing is saved. All state lives in memory.