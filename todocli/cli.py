"""Interactive menu-driven front end for the todo list."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from todocli.storage import JSONStorage, Storage
from todocli.task import Task, TaskNotFoundError, TodoList

DEFAULT_FILENAME = "tasks.json"

_INTEGER = re.compile(r"[+-]?\d+")
_MENU_OPTIONS = (
    "1. 📝 Adicionar tarefa",
    "2. 📋 Listar todas as tarefas",
    "3. ✅ Marcar tarefa como concluída",
    "4. ❌ Marcar tarefa como pendente",
    "5. 🗑️  Remover tarefa",
    "6. 🔍 Buscar tarefas",
    "7. ⏳ Listar tarefas pendentes",
    "8. 💾 Salvar e sair",
)


def _display_time(task: Task) -> str:
    moment = task.created_at
    return (
        f"{moment.day:02d}/{moment.month:02d}/{moment.year:04d} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


class CLI:
    """Reads menu choices from a stream and acts on a todo list."""

    def __init__(
        self,
        storage: Storage,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.todo_list = TodoList()
        self.storage = storage
        self._in = sys.stdin if input_stream is None else input_stream
        self._out = sys.stdout if output is None else output
        self._exhausted = False

    # -- main loop ---------------------------------------------------------

    def start(self) -> None:
        """Load the stored list and run the menu until the user leaves."""
        try:
            self.todo_list = self.storage.load()
        except (OSError, ValueError) as exc:
            raise RuntimeError(f"erro ao carregar dados: {exc}") from exc

        self._print("=== 📋 Todo CLI ===")
        self._print("Bem-vindo ao seu gerenciador de tarefas!")

        while True:
            self._display_menu()
            choice = self._read_input("Escolha uma opção: ")
            if self._exhausted:
                break
            try:
                if not self.handle_menu_choice(choice):
                    break
            except (ValueError, OSError):
                continue

        self._print("👋 Até mais!")

    def handle_menu_choice(self, choice: str) -> bool:
        """Run one menu option; return False when the session should end.

        Raises ValueError for an unknown option and OSError when saving fails.
        """
        actions = {
            "1": self._add_task,
            "2": self._list_all_tasks,
            "3": lambda: self._toggle_task_completed(True),
            "4": lambda: self._toggle_task_completed(False),
            "5": self._remove_task,
            "6": self._search_tasks,
            "7": self._list_pending_tasks,
        }
        if choice == "8":
            self.storage.save(self.todo_list)
            self._print("💾 Dados salvos com sucesso!")
            return False
        action = actions.get(choice)
        if action is None:
            raise ValueError(f"opção inválida: {choice}")

        try:
            action()
        except (ValueError, LookupError) as exc:
            message = exc.args[0] if isinstance(exc, TaskNotFoundError) else exc
            self._print(f"❌ Erro: {message}")

        self._wait_for_enter()
        return True

    # -- input / output ----------------------------------------------------

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _read_input(self, prompt: str) -> str:
        self._print(prompt, end="")
        self._out.flush()
        line = self._in.readline()
        if not line:
            self._exhausted = True
            return ""
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        text = self._read_input(prompt)
        if not text:
            raise ValueError("entrada vazia")
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"número inválido: {text}")
        return int(text)

    def _wait_for_enter(self) -> None:
        self._print("\n🔄 Pressione Enter para continuar...", end="")
        self._out.flush()
        if not self._in.readline():
            self._exhausted = True

    def _display_menu(self) -> None:
        total, completed, pending = self.todo_list.stats()
        self._print("\n=== MENU PRINCIPAL ===")
        self._print(
            f"📊 Status: {total} total | ✅ {completed} concluídas | ⏳ {pending} pendentes\n"
        )
        for option in _MENU_OPTIONS:
            self._print(option)
        self._print()

    def _display_task(self, task: Task) -> None:
        status = "✅ Concluída" if task.completed else "⏳ Pendente"
        self._print(f"🆔 ID: {task.id}")
        self._print(f"📌 Título: {task.title}")
        self._print(f"📄 Descrição: {task.description}")
        self._print(f"📊 Status: {status}")
        self._print(f"📅 Criada em: {_display_time(task)}")

    def _display_task_summary(self, task: Task) -> None:
        status = "✅" if task.completed else "⏳"
        self._print(f"  {status} [{task.id}] {task.title}")

    def _show_available(self) -> None:
        self._print("📋 Tarefas disponíveis:")
        for task in self.todo_list.tasks:
            self._display_task_summary(task)
        self._print()

    def _read_task_id(self, prompt: str) -> int:
        try:
            return self._read_int(prompt)
        except ValueError as exc:
            raise ValueError(f"ID inválido: {exc}") from exc

    # -- actions -----------------------------------------------------------

    def _add_task(self) -> None:
        self._print("\n=== 📝 ADICIONAR NOVA TAREFA ===")
        title = self._read_input("📌 Título da tarefa: ")
        if not title:
            raise ValueError("título não pode ser vazio")
        description = self._read_input("📄 Descrição da tarefa: ")
        if not description:
            raise ValueError("descrição não pode ser vazia")

        task = self.todo_list.add_task(title, description)
        self._print("\n✅ Tarefa criada com sucesso!")
        self._print(f"🆔 ID: {task.id}")
        self._print(f"📌 Título: {task.title}")
        self._print(f"📄 Descrição: {task.description}")

    def _list_all_tasks(self) -> None:
        self._print("\n=== 📋 TODAS AS TAREFAS ===")
        if not self.todo_list.tasks:
            self._print("📭 Nenhuma tarefa encontrada!")
            return
        self._print(f"📊 Total de tarefas: {len(self.todo_list.tasks)}\n")
        for task in self.todo_list.tasks:
            self._display_task(task)
            self._print()

    def _list_pending_tasks(self) -> None:
        self._print("\n=== ⏳ TAREFAS PENDENTES ===")
        pending = self.todo_list.list_pending_tasks()
        if not pending:
            self._print("🎉 Parabéns! Todas as tarefas foram concluídas!")
            return
        self._print(f"⏳ Tarefas pendentes: {len(pending)}\n")
        for task in pending:
            self._display_task(task)
            self._print()

    def _toggle_task_completed(self, mark_as_completed: bool) -> None:
        status, emoji = ("concluída", "✅") if mark_as_completed else ("pendente", "⏳")
        self._print(f"\n=== {emoji} MARCAR TAREFA COMO {status.upper()} ===")

        if not self.todo_list.tasks:
            self._print("📭 Nenhuma tarefa encontrada!")
            return
        self._show_available()

        task_id = self._read_task_id("🆔 Digite o ID da tarefa: ")
        task = self.todo_list.get_task(task_id)
        if task.completed == mark_as_completed:
            current = "concluída" if task.completed else "pendente"
            raise ValueError(f"tarefa já está {current}")

        self.todo_list.toggle_task(task_id)
        self._print(f"\n{emoji} Tarefa marcada como {status}!")
        self._print(f"📌 {task.title}")

    def _remove_task(self) -> None:
        self._print("\n=== 🗑️ REMOVER TAREFA ===")
        if not self.todo_list.tasks:
            self._print("📭 Nenhuma tarefa encontrada!")
            return
        self._show_available()

        task_id = self._read_task_id("🆔 Digite o ID da tarefa para remover: ")
        task = self.todo_list.get_task(task_id)

        self._print("\n⚠️  Tem certeza que deseja remover esta tarefa?")
        self._print(f"📌 {task.title}")
        self._print(f"📄 {task.description}")

        confirmation = self._read_input("Digite 'sim' para confirmar: ")
        if confirmation.lower() != "sim":
            self._print("❌ Remoção cancelada.")
            return

        self.todo_list.remove_task(task_id)
        self._print("🗑️ Tarefa removida com sucesso!")

    def _search_tasks(self) -> None:
        self._print("\n=== 🔍 BUSCAR TAREFAS ===")
        if not self.todo_list.tasks:
            self._print("📭 Nenhuma tarefa encontrada!")
            return

        query = self._read_input("🔍 Digite o termo de busca: ")
        if not query:
            raise ValueError("termo de busca não pode ser vazio")

        results = self.todo_list.search_tasks(query)
        if not results:
            self._print(f"❌ Nenhuma tarefa encontrada para '{query}'")
            return
        self._print(f"✅ Encontradas {len(results)} tarefa(s) para '{query}':\n")
        for task in results:
            self._display_task(task)
            self._print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive todo manager on tasks.json in the current directory."""
    app = CLI(JSONStorage(DEFAULT_FILENAME))
    try:
        app.start()
    except RuntimeError as exc:
        print(f"❌ Erro ao executar aplicação: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())