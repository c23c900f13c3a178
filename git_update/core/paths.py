"""
Dynamic path resolution for git-update.

All paths are calculated from the environment rather than the current working
directory, so the checker behaves the same wherever the host process starts it.
"""

import os
from pathlib import Path

DATA_DIR_ENV = "GIT_UPDATE_DATA"


def get_package_root() -> Path:
    """
    Get the directory containing the git_update/ package.

    Returns:
        Path: Absolute path to the project root
    """
    # This file is at: git_update/core/paths.py
    return Path(__file__).parent.parent.parent.resolve()


def get_data_dir() -> Path:
    """
    Get the data directory holding persisted site options.

    Priority order:
    1. GIT_UPDATE_DATA environment variable
    2. ~/.git-update

    Returns:
        Path: Absolute path to the data directory (created if missing)

    Example:
        >>> data = get_data_dir()
        >>> print(data)
        /root/.git-update
    """
    env_path = os.environ.get(DATA_DIR_ENV)
    if env_path:
        data_dir = Path(env_path).expanduser().resolve()
    else:
        data_dir = Path.home() / ".git-update"

    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_options_file() -> Path:
    """
    Get the JSON file backing the site option store.

    Returns:
        Path: Absolute path to options.json inside the data directory
    """
    return get_data_dir() / "options.json"
