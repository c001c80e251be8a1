# todocli

A small interactive task manager for the terminal. Tasks live in a
`tasks.json` file in the current directory. The file is read when the
program starts and written only when you choose "Salvar e sair".

The menus and messages are in Portuguese.

## Installation

```
pip install .
```

## Usage

```
todocli
```

The main menu shows how many tasks there are in total, how many are done
and how many are pending. It then offers these options:

1. Add a task (title and description, neither may be empty)
2. List every task
3. Mark a task as done
4. Mark a task as pending
5. Remove a task (asks you to type `sim` to confirm)
6. Search tasks by a term in the title or description, ignoring case
7. List pending tasks
8. Save and quit

After each action the program waits for Enter before it shows the menu
again. An unknown option brings the menu back straight away. The session
also ends when standard input runs out; in that case nothing is saved.

If `tasks.json` exists but cannot be read or is not valid, the program
prints an error to standard error and exits with status 1.

## Using it as a library

```python
from todocli.task import TodoList
from todocli.storage import JSONStorage

storage = JSONStorage("tasks.json")
todo = storage.load()            # empty list if the file does not exist
task = todo.add_task("Comprar pão", "Padaria da esquina")
todo.toggle_task(task.id)
total, completed, pending = todo.stats()
storage.save(todo)
```

`TodoList` also offers `get_task`, `remove_task`, `list_pending_tasks`
and `search_tasks`. `get_task`, `toggle_task` and `remove_task` raise
`TaskNotFoundError` when no task has the given id.

`Storage` is the abstract base class with `save` and `load`; `JSONStorage`
is the implementation that the command uses.

The interactive loop is the `CLI` class in `todocli.cli`. It takes a
storage and, optionally, the input and output streams to use instead of
standard input and output, which makes it easy to drive from code.

## Data file

The file is indented JSON with a `tasks` list and a `next_id` counter.
Each task has `id`, `title`, `description`, `completed` and `created_at`
(an RFC 3339 timestamp).

## What it does not do

There is no way to edit a task's title or description once it is created,
no listing of completed tasks only, and no statistics screen beyond the
counts shown in the main menu. The data file name is fixed to
`tasks.json`; the command takes no options.

## Development

```
pip install -e ".[test]"
pytest
```