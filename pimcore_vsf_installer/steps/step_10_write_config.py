from __future__ import annotations

import logging

from .. import messages
from ..config_writer import ConfigWriteError, write_config
from ..pipeline import SetupCtx, StepResult

logger = logging.getLogger(__name__)


class WriteConfigStep:
    step_id = "10_write_config"

    def run(self, ctx: SetupCtx) -> StepResult:
        messages.info(f"Creating pimcore config '{ctx.target_config}'...")
        try:
            write_config(
                ctx.configuration,
                ctx.classes,
                source_path=ctx.source_config,
                target_path=ctx.target_config,
            )
        except ConfigWriteError as e:
            return StepResult.failure(str(e))
        return StepResult.success()
