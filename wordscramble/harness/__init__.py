from .core import run_game, run_batch, DEFAULT_MAX_SUBMISSIONS
from .io import write_csv, write_manifest

__all__ = ["run_game", "run_batch", "DEFAULT_MAX_SUBMISSIONS", "write_csv", "write_manifest"]
