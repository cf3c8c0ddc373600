import asyncio
from dataclasses import dataclass
from enum import Enum

from st8 import create_store, delay


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str
    status: TaskStatus


def add_task(data: dict, description: str) -> int:
    """Append a pending task, returning its index."""
    data["tasks"].append(Task(description, TaskStatus.PENDING))
    return len(data["tasks"]) - 1


def progress(data: dict, index: int) -> None:
    """Move one task forward in its lifecycle."""
    task = data["tasks"][index]
    if task.status == TaskStatus.PENDING:
        task.status = TaskStatus.IN_PROGRESS
    elif task.status == TaskStatus.IN_PROGRESS:
        task.status = TaskStatus.COMPLETED


async def work_on(commit, index: int) -> None:
    """Simulate doing a task: start it, wait, finish it."""
    commit("progress", index)
    await delay(0.01)
    commit("progress", index)


async def main() -> None:
    store = create_store(
        {
            "data": {"tasks": [], "owner": "agent-1"},
            "mutations": {"add_task": add_task, "progress": progress},
            "actions": {"work_on": work_on},
        }
    )

    for description in ("Collect data", "Analyze data", "Generate report"):
        store.commit("add_task", description)

    # Direct writes are ignored
    store.owner = "someone-else"
    print(f"Owner: {store.owner}")

    await asyncio.gather(*(store.action("work_on", i) for i in range(2)))
    for task in store.tasks:
        print(f"{task.description}: {task.status.value}")


if __name__ == "__main__":
    asyncio.run(main())
