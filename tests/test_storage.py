import json

import pytest

from todocli.storage import JSONStorage, Storage
from todocli.task import TodoList


def test_storage_is_abstract():
    with pytest.raises(TypeError):
        Storage()


def test_json_storage_is_a_storage(tmp_path):
    storage = JSONStorage(tmp_path / "tasks.json")
    assert isinstance(storage, Storage)
    assert storage.filename == tmp_path / "tasks.json"


def test_load_missing_file_returns_empty_list(tmp_path):
    todo_list = JSONStorage(tmp_path / "nada.json").load()
    assert todo_list.tasks == []
    assert todo_list.next_id == 1


def test_save_then_load_round_trip(tmp_path):
    storage = JSONStorage(tmp_path / "tasks.json")
    todo_list = TodoList()
    todo_list.add_task("Comprar", "pão")
    todo_list.add_task("Estudar", "")
    todo_list.toggle_task(2)
    storage.save(todo_list)
    assert storage.load() == todo_list


def test_saved_file_layout(tmp_path):
    path = tmp_path / "tasks.json"
    JSONStorage(path).save(TodoList())
    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == {"tasks": [], "next_id": 1}
    assert text.splitlines()[1].startswith(' "tasks"')


def test_html_characters_are_escaped(tmp_path):
    path = tmp_path / "tasks.json"
    storage = JSONStorage(path)
    todo_list = TodoList()
    todo_list.add_task("<a & b>", "ação")
    storage.save(todo_list)
    text = path.read_text(encoding="utf-8")
    assert "\\u003ca \\u0026 b\\u003e" in text
    assert "ação" in text
    assert storage.load().tasks[0].title == "<a & b>"


def test_save_overwrites_previous_contents(tmp_path):
    storage = JSONStorage(tmp_path / "tasks.json")
    first = TodoList()
    first.add_task("a", "b")
    storage.save(first)
    storage.save(TodoList())
    assert storage.load().tasks == []


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("{ quebrado", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        JSONStorage(path).load()


def test_wrong_shape_raises(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text('{"tasks": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        JSONStorage(path).load()