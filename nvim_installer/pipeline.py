from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .context import InstallContext
from .errors import ErrorKind, InstallerError

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single fallible step; raising stops the pipeline."""

    step_id: str

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallContext,
    steps: Sequence[Step],
    state: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """Run steps in order; the first failure aborts the run.

    Completed steps are not rolled back. Errors leave as InstallerError
    stamped with the failing step_id.
    """

    state = {} if state is None else state
    ran: List[str] = []

    for step in steps:
        state["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)
        try:
            state = step.run(ctx, state)
        except InstallerError as e:
            if e.step_id is None:
                e.step_id = step.step_id
            raise
        except OSError as e:
            raise InstallerError(ErrorKind.FILESYSTEM, str(e), step_id=step.step_id) from e
        ran.append(step.step_id)

    state["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
