"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Outcome of a ``cmd_*`` function.

    ``announce`` is shown before work starts, ``progress_callback`` yields
    ``(fraction, message)`` pairs while it fills in ``result``, ``output``
    and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def fail(self, error: Exception, **output) -> None:
        """Record a failed command; ``output`` holds the command's empty fields."""
        self.output = {"errors": [str(error)], **output}
        self.result = str(error)
        self.success = False
