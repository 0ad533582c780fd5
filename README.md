# localassist

A library of building blocks for a local language-model chat tool.
It keeps chat sessions and messages in SQLite. It manages a folder of
context documents and drafts article content. It also builds the prompts
that are sent to a model.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Chat sessions

`localassist.models` defines `Session`, `ChatMessage` and `ChatRole`.
`Session.new` and `ChatMessage.new` give a fresh id and the current UTC time.
`ChatRole.parse` turns a stored role name into a role and raises `ValueError`
for a name it does not know.

`localassist.database.Database` stores sessions and messages in a SQLite file.

```python
from localassist.database import open_database
from localassist.models import ChatMessage, ChatRole
from localassist.sessions import SessionService

with open_database("data") as db:
    service = SessionService(db)
    session = service.create_session("Trip planning")
    service.save_message(ChatMessage.new(session.id, ChatRole.USER, "Hello"))
    for message in service.get_session_messages(str(session.id)):
        print(message.role, message.content)
```

- `open_database(data_dir)` creates the directory if it is missing and opens
  the file `assistant.db` inside it. Called without a directory, it uses the
  `data` folder of the project root.
- `find_project_root(start)` walks up at most ten levels from `start` to find
  a directory that holds `pyproject.toml`. If it finds none, it returns the
  current working directory.
- `Database(path)` opens a file directly. It works as a context manager.
  Any call on a closed database raises `DatabaseNotInitialized`.
- `get_all_sessions` returns the sessions with the most recently updated first.
  `get_session_messages` returns messages with the oldest first.
  `save_message` replaces a message that has the same id and updates the
  session's update time. `delete_session` also removes the session's messages.

`SessionService` wraps a `Database`, or `None`. When storage fails, it logs a
warning and carries on: reads return `[]` or `None` and writes are dropped.
`create_session` without a title names the session "New Chat".
A malformed session id gives `None` or an empty list where a session is looked
up. Where a session is deleted or renamed, it raises `ValueError`.

## Context documents

```python
from localassist.context_docs import ContextStore

store = ContextStore("context")
store.add_document("Project notes", "# Notes\n...")   # saved as Project_notes.md
for item in store.list_files():
    print(item.name, item.size, item.preview)
print(store.get_document("Project_notes.md"))
store.delete_document("Project_notes.md")
```

- `list_files` lists only `.md`, `.txt` and `.json` files, sorted by name.
  Each `ContextFile` carries a preview of up to 100 characters.
- `sanitize_title` shows the file name a title will get: every character other
  than a letter, a digit, `-` or `_` becomes `_`. `.md` is added unless the
  result already ends in `.md` or `.txt`.
- `get_document` and `delete_document` raise `ValueError` for a name that
  contains `..` or `/`.

## Content drafting

`localassist.content` builds the prompts for article drafting:

- `outline_prompt(title, template_name)` asks for an article outline.
- `section_prompt(section_title, context)` asks for the text of one section.
- `image_prompt(text)` asks for an illustration prompt. It uses only the first
  500 characters of `text`.

`parse_outline_response` reads a model's outline reply into
`(title, description)` pairs, starting a new pair at each `## ` heading.
`outline_or_default` does the same, but falls back to a standard outline of
four sections when the reply has no headings. `export_to_markdown` and
`export_to_html` render a finished draft.

```python
from localassist.content import export_to_markdown

print(export_to_markdown("My Article", [("Introduction", "Hello.")]))
```

## Retrieval helpers

`localassist.rag.Document` holds a title, a body and a score between 0 and 1.
`format_search_context` numbers the documents as references and shows each
one's relevance in percent. `augment_prompt(query, documents)` puts the
documents in front of a question as context. With no documents, it returns
the question unchanged.

## Video generation settings

`localassist.video` describes the video providers and models to choose from.
`VideoGenForm` holds a request and its defaults.

- `available_video_providers(local_model_ids)` lists the remote providers. It
  adds a "Local Machine" provider when any local model id looks like a video
  model; `is_video_model_id` makes that guess.
- `check_video_api_configs(environ)` reports which providers have their API
  key variable set.
- `get_video_generation_status(task_id)` always reports a task as completed.

## What it does not do

This package runs no language, embedding, image, speech or video model. It
does no vector search and fetches nothing from the network. It has no server,
user interface or command-line program. It provides the storage, file
handling and prompt text that such parts would use.