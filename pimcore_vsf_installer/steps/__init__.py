from .step_10_write_config import WriteConfigStep
from .step_20_run_importer import RunImporterStep, build_import_steps

__all__ = [
    "WriteConfigStep",
    "RunImporterStep",
    "build_import_steps",
]
