"""Batch operator for dumpster operations.

Runs a verb over every caller-supplied argument in order. Each argument
is processed independently: a failure is recorded in its result and the
next argument is still processed.
"""

import logging

from yeet.core.errors import YeetError
from yeet.dumpster.engine import Dumpster
from yeet.dumpster.models import DumpsterActionResult, Verb

logger = logging.getLogger(__name__)


class DumpsterOperator:
    """Applies dumpster operations to lists of paths.

    Attributes:
        _dumpster: The Dumpster the operations run against.
    """

    def __init__(self, dumpster: Dumpster) -> None:
        """Initialize the DumpsterOperator.

        Args:
            dumpster: Initialized Dumpster to operate on.
        """
        self._dumpster = dumpster

    @property
    def dumpster(self) -> Dumpster:
        """The Dumpster the operations run against."""
        return self._dumpster

    def run(self, verb: Verb, arguments: list[str]) -> list[DumpsterActionResult]:
        """Run a verb and return its results.

        Args:
            verb: Operation to run.
            arguments: Path strings for YEET and RESTORE; ignored for EMPTY.

        Returns:
            One DumpsterActionResult per argument, or per dumpster entry for EMPTY.

        Raises:
            IoFailure: If EMPTY cannot list the dumpster root.
        """
        if verb == Verb.EMPTY:
            return self.empty()
        if verb == Verb.RESTORE:
            return self.restore(arguments)
        return self.yeet(arguments)

    def yeet(self, arguments: list[str]) -> list[DumpsterActionResult]:
        """Move every argument into the dumpster."""
        return [self._apply_single(Verb.YEET, argument) for argument in arguments]

    def restore(self, arguments: list[str]) -> list[DumpsterActionResult]:
        """Move every argument out of the dumpster."""
        return [self._apply_single(Verb.RESTORE, argument) for argument in arguments]

    def empty(self) -> list[DumpsterActionResult]:
        """Delete everything in the dumpster.

        Raises:
            IoFailure: If the dumpster root cannot be listed.
        """
        return self._dumpster.empty()

    def _apply_single(self, verb: Verb, argument: str) -> DumpsterActionResult:
        """Yeet or restore a single argument.

        Args:
            verb: YEET or RESTORE.
            argument: Path string as supplied by the caller.

        Returns:
            DumpsterActionResult indicating success or failure.
        """
        operation = self._dumpster.restore if verb == Verb.RESTORE else self._dumpster.yeet
        try:
            destination = operation(argument)
        except YeetError as e:
            logger.debug("%s %s failed: %s", verb.value, argument, e)
            return DumpsterActionResult(
                argument=argument,
                verb=verb,
                success=False,
                error=str(e),
            )

        return DumpsterActionResult(
            argument=argument,
            verb=verb,
            success=True,
            destination=str(destination),
        )
