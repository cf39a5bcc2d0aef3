from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


ENV_PATH = Path(".env")


def load_env(path: Path = ENV_PATH) -> None:
    """Load credentials such as WEATHERFLOW_TOKEN or DEVOPS_PAT from .env."""
    load_dotenv(dotenv_path=path, override=False)
