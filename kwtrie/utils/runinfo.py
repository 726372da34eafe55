from __future__ import annotations

import subprocess
from datetime import datetime, timezone


def current_git_sha_short() -> str:
    try:
        sha = (
            subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "nogit"
    return sha or "nogit"


def new_run_id() -> str:
    ts = datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
    return f"{ts}-{current_git_sha_short()}"
