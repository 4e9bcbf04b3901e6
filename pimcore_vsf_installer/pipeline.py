from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from .logging_utils import LogTargets
from .settings import Configuration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupCtx:
    configuration: Configuration
    classes: Tuple[Dict[str, Any], ...]
    log_targets: LogTargets
    source_config: str
    target_config: str
    importer_dir: str
    importer_argv: Tuple[str, ...]
    dry_run: bool = False


@dataclass(frozen=True)
class StepResult:
    ok: bool
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "StepResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> "StepResult":
        return cls(ok=False, message=message)


class Step(Protocol):
    """A single fallible setup step."""

    step_id: str

    def run(self, ctx: SetupCtx) -> StepResult:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ok: bool
    configuration: Configuration
    ran_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    message: Optional[str] = None


def run_pipeline(*, ctx: SetupCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first failure."""

    ran: List[str] = []

    for step in steps:
        logger.info("Running step %s", step.step_id)
        result = step.run(ctx)
        ran.append(step.step_id)

        if not result.ok:
            logger.error("Step %s failed: %s", step.step_id, result.message)
            return PipelineResult(
                ok=False,
                configuration=ctx.configuration,
                ran_steps=ran,
                failed_step=step.step_id,
                message=result.message,
            )

    return PipelineResult(ok=True, configuration=ctx.configuration, ran_steps=ran)
