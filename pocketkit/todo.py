"""A small to-do list kept in a JSON file, with a command-line front end."""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_PATH = "tasks.json"

_COMMANDS_HINT = "add, list, complete, delete"
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class Task:
    """One entry of the to-do list."""

    id: int
    description: str
    created_at: datetime = field(default_factory=lambda: datetime.now().astimezone())
    done: bool = False


def _format_time(moment: datetime) -> str:
    text = moment.astimezone(moment.tzinfo).isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _parse_time(text: str) -> datetime:
    text = re.sub(r"Z$", "+00:00", text)
    text = re.sub(r"\.(\d+)", lambda m: "." + m[1][:6].ljust(6, "0"), text)
    return datetime.fromisoformat(text)


class TaskStore:
    """Tasks persisted as a JSON array in one file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Read all tasks; a missing file means an empty list."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        if not isinstance(data, (list, type(None))):
            raise ValueError(f"{self.path} does not hold a list of tasks")
        return [
            Task(
                id=int(item.get("ID") or 0),
                description=str(item.get("Description") or ""),
                created_at=_parse_time(item["CreatedAt"]) if item.get("CreatedAt") else _ZERO_TIME,
                done=bool(item.get("Done", False)),
            )
            for item in data or []
        ]

    def save(self, tasks: list[Task]) -> None:
        """Write all tasks, replacing the file's contents."""
        records = [
            {"ID": t.id, "Description": t.description,
             "CreatedAt": _format_time(t.created_at), "Done": t.done}
            for t in tasks
        ]
        self.path.write_text(json.dumps(records, indent=1, ensure_ascii=False), encoding="utf-8")

    def add(self, description: str) -> Task:
        """Append a new open task and return it."""
        tasks = self.load()
        task = Task(id=len(tasks) + 1, description=description)
        self.save([*tasks, task])
        return task

    def list(self, include_done: bool = False) -> list[Task]:
        """Return the open tasks, or every task when include_done is true."""
        return [t for t in self.load() if include_done or not t.done]

    def complete(self, task_id: int) -> bool:
        """Mark a task done; False if it is missing or already done."""
        tasks = self.load()
        task = next((t for t in tasks if t.id == task_id), None)
        if task is None or task.done:
            return False
        task.done = True
        self.save(tasks)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove the first task with the id; False if there is none."""
        tasks = self.load()
        for position, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[position]
                self.save(tasks)
                return True
        return False


def main(argv: list[str] | None = None) -> int:
    """Run one to-do command against the task file in the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"Please provide a command: {_COMMANDS_HINT}")
        return 1
    store = TaskStore()
    command, rest = args[0], args[1:]

    if command == "add":
        if not rest:
            print("Please provide a task description.")
            return 1
        try:
            store.add(rest[0])
        except (OSError, ValueError) as exc:
            print("Error adding task:", exc)
            return 1
        print("Task added successfully!")
        return 0

    if command == "list":
        try:
            tasks = store.list(bool(rest) and rest[0] == "--all")
        except (OSError, ValueError):
            tasks = []
        if not tasks:
            print("No tasks found.")
        for task in tasks:
            print(
                f"ID: {task.id}, Description: {task.description}, "
                f"Created At: {task.created_at:%Y-%m-%d %H:%M:%S}, "
                f"Done: {'true' if task.done else 'false'}"
            )
        return 0

    if command in ("complete", "delete"):
        if not rest:
            print("Please provide a task ID.")
            return 1
        if not re.fullmatch(r"[+-]?[0-9]+", rest[0]):
            print("Invalid task ID:", f'invalid task ID "{rest[0]}"')
            return 1
        action = store.complete if command == "complete" else store.delete
        try:
            ok = action(int(rest[0]))
        except (OSError, ValueError):
            ok = False
        if command == "complete":
            print("Task completed successfully!" if ok else "Task not found or already completed.")
        else:
            print("Task deleted successfully!" if ok else "Task not found or could not be deleted.")
        return 0 if ok else 1

    print(f"Unknown command. Available commands: {_COMMANDS_HINT}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())