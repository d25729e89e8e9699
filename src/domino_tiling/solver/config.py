"""Domino tiling solver configuration."""

from dotenv import find_dotenv
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the domino tiling solver."""

    log_dir: str = "logs"
    """Directory in which per-puzzle log files are written. Default: "logs"."""

    report_interval: PositiveInt = 100_000
    """Interval (in number of board states checked) at which to log progress. Default: 100000."""

    recursion_limit: PositiveInt = 20_000
    """Python recursion limit to apply before searching.

    The search recurses once per orientation attempt as well as once per placement, so deep
    searches on large boards need more than the interpreter default. Default: 20000.
    """

    show_piece_ids: bool = True
    """Whether to also print a solved board with piece IDs in place of keys. Default: True."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="DOMINO_",
        extra="forbid",
    )


config = SolverConfig()
