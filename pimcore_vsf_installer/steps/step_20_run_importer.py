from __future__ import annotations

import logging
from typing import List

from .. import messages
from ..lib.command import run_cmd
from ..pipeline import SetupCtx, StepResult

logger = logging.getLogger(__name__)


class RunImporterStep:
    """Invoke the external importer with a single command argument."""

    def __init__(self, step_id: str, command: str, failure_message: str):
        self.step_id = step_id
        self.command = command
        self.failure_message = failure_message

    def run(self, ctx: SetupCtx) -> StepResult:
        messages.info(f"Running Pimcore importer: {self.command} ...")
        argv = [*ctx.importer_argv, self.command]
        output = ctx.log_targets.info_log if ctx.log_targets.created else None

        try:
            r = run_cmd(argv, cwd=ctx.importer_dir, output_path=output, dry_run=ctx.dry_run)
        except OSError as e:
            # e.g. importer binary or working directory missing
            logger.error("Could not start importer %r: %s", self.command, e)
            return StepResult.failure(self.failure_message)

        if r.returncode != 0:
            return StepResult.failure(self.failure_message)
        return StepResult.success()


def build_import_steps() -> List[RunImporterStep]:
    return [
        RunImporterStep("20_create_index", "new", "Can't create elasticsearch index."),
        RunImporterStep("30_import_taxrules", "taxrules", "Can't import the taxrules"),
        RunImporterStep("40_import_categories", "categories", "Can't import the categories"),
        RunImporterStep("50_import_products", "products", "Can't import the products"),
        RunImporterStep("60_publish_index", "publish", "Can't publish the index"),
    ]
