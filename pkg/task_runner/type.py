class TaskRunnerClosedError(RuntimeError):
    """Raised when work is submitted after shutdown."""

    pass


__all__ = ["TaskRunnerClosedError"]
