from __future__ import annotations

import argparse
import logging
import platform
from typing import Mapping, Optional, Sequence

from . import messages
from .collector import ClientFactory, collect_configuration, default_client_factory
from .lib.env import DEFAULT_IMPORTER_ARGV, PATHS
from .logging_utils import (
    attach_log_file,
    bootstrap_log_files,
    configure_logging,
    install_excepthook,
)
from .pipeline import PipelineResult, SetupCtx, Step, run_pipeline
from .settings import load_env_file
from .steps import WriteConfigStep, build_import_steps

logger = logging.getLogger(__name__)

DOCS_URL = "https://github.com/DivanteLtd/pimcore2vuestorefront"


class SetupError(RuntimeError):
    pass


def build_steps() -> list[Step]:
    return [WriteConfigStep(), *build_import_steps()]


def check_user_os(system: Optional[str] = None) -> bool:
    """Advisory only: prints an error on Windows but never stops the run."""

    system = system or platform.system()
    if system == "Windows":
        messages.error(
            [
                "Unfortunately currently only Linux and OSX are supported.",
                "To install pimcore2vuestorefront on Windows please go through the manual installation process:",
                f"{DOCS_URL}#installation",
            ]
        )
        return False
    return True


def show_welcome_message() -> None:
    messages.greeting(
        [
            "Hi, welcome to the pimcore2vuestorefront setup.",
            "Let's configure it together :)",
        ]
    )


def show_goodbye_message() -> None:
    messages.greeting(
        [
            "Congratulations!",
            "",
            "You've just configured Pimcore -> VueStorefront integrator.",
            "",
            "Good Luck!",
        ],
        True,
    )


def run(
    *,
    environ: Optional[Mapping[str, str]] = None,
    source_config: str = PATHS.source_config,
    target_config: str = PATHS.target_config,
    log_dir: str = PATHS.log_dir,
    importer_dir: str = PATHS.importer_dir,
    importer_argv: Sequence[str] = DEFAULT_IMPORTER_ARGV,
    index_name: Optional[str] = None,
    dry_run: bool = False,
    client_factory: ClientFactory = default_client_factory,
    steps: Optional[Sequence[Step]] = None,
) -> PipelineResult:
    """Collect configuration, bootstrap logs, write config.json and import.

    Raises SetupError when configuration collection or any pipeline step fails.
    """

    show_welcome_message()

    collected = collect_configuration(environ, client_factory=client_factory, index_name=index_name)
    if not collected.success or collected.configuration is None:
        logger.error("Configuration collection failed: %s", collected.message)
        raise SetupError(f"There was an error importing data from Pimcore: {collected.message}")

    log_targets = bootstrap_log_files(log_dir)
    attach_log_file(log_targets)

    ctx = SetupCtx(
        configuration=collected.configuration,
        classes=tuple(collected.classes),
        log_targets=log_targets,
        source_config=source_config,
        target_config=target_config,
        importer_dir=importer_dir,
        importer_argv=tuple(importer_argv),
        dry_run=dry_run,
    )

    result = run_pipeline(ctx=ctx, steps=build_steps() if steps is None else steps)
    if not result.ok:
        raise SetupError(result.message or f"Step {result.failed_step} failed")

    logger.info("Setup finished (steps=%s)", result.ran_steps)
    show_goodbye_message()
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="pimcore-vsf-setup")
    p.add_argument("--template", default=PATHS.source_config, help="Template config to merge into")
    p.add_argument("--config", default=PATHS.target_config, help="Config file to write")
    p.add_argument("--log-dir", default=PATHS.log_dir, help="Directory for install.log and general.log")
    p.add_argument("--importer-dir", default=PATHS.importer_dir, help="Working directory of the importer")
    p.add_argument("--index-name", default=None, help="Elasticsearch index name")
    p.add_argument("--env-file", default=None, help="Path to a .env file (default: ./.env)")
    p.add_argument("--dry-run", action="store_true", help="Log importer commands without running them")
    p.add_argument("--verbose", action="store_true", help="Mirror log records to the console")

    args = p.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO, also_console=bool(args.verbose))
    install_excepthook()
    load_env_file(args.env_file)

    check_user_os()

    try:
        run(
            source_config=args.template,
            target_config=args.config,
            log_dir=args.log_dir,
            importer_dir=args.importer_dir,
            index_name=args.index_name,
            dry_run=bool(args.dry_run),
        )
    except Exception as e:
        logger.exception("Setup failed")
        messages.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
