from .task_runner import TaskRunner
from .type import TaskRunnerClosedError

__all__ = ["TaskRunner", "TaskRunnerClosedError"]
