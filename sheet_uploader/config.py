"""Central configuration for the sheet-driven uploader.

Sections are grouped by feature for easier editing. Secrets are never
compiled in; they come from the environment (optionally a ``.env`` file)
through :func:`load_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import FatalSetupError

# ---------------------------------------
# Size gate
# ---------------------------------------
# Files at or below this size are assumed to be broken exports
MIN_UPLOAD_BYTES = 1024 * 1024
TOO_SMALL_MESSAGE = "file too small, likely export error"

# ---------------------------------------
# Worker pool
# ---------------------------------------
DEFAULT_WORKERS = 3

# ---------------------------------------
# Spreadsheet layout
# ---------------------------------------
SHEET_NAME = "Sheet1"
# Columns A-J hold the job description, L receives the result
READ_FIRST_COLUMN = "A"
READ_LAST_COLUMN = "J"
RESULT_COLUMN = "L"
ROW_WIDTH = 10

# ---------------------------------------
# YouTube upload settings
# ---------------------------------------
YOUTUBE_CATEGORY_ID = "22"  # People & Blogs
YOUTUBE_PRIVACY = "private"
YOUTUBE_URL_PREFIX = "https://youtu.be/"
CHUNKSIZE = 8 * 1024 * 1024  # 8MB works well; library handles resumable uploading
# Seconds a single HTTP request may block before the row fails
REQUEST_TIMEOUT = 600

# ---------------------------------------
# OAuth
# ---------------------------------------
SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
    "https://www.googleapis.com/auth/spreadsheets",
]

_tokens_dir_override = os.environ.get("SHEET_UPLOADER_TOKENS_DIR")
if _tokens_dir_override:
    TOKENS_DIR = Path(_tokens_dir_override).expanduser().resolve()
else:
    TOKENS_DIR = Path(__file__).with_name("tokens")

ENV_PREFIX = "SHEET_UPLOADER_"


@dataclass(frozen=True)
class UploaderConfig:
    """Runtime settings for one upload run."""

    client_id: str
    client_secret: str
    sheet_id: str
    tokens_file: Path = TOKENS_DIR / "google.json"
    request_timeout: float = REQUEST_TIMEOUT
    privacy: str = YOUTUBE_PRIVACY


def load_config(env_file: Path | str | None = ".env", **overrides: object) -> UploaderConfig:
    """Build an :class:`UploaderConfig` from the environment.

    ``env_file`` is loaded first with :func:`dotenv.load_dotenv`; variables
    already present in ``os.environ`` win. Keyword ``overrides`` replace the
    optional fields (``privacy``, ``request_timeout``, ``tokens_file``).
    """

    if env_file:
        load_dotenv(dotenv_path=env_file, override=False)

    required = {
        "client_id": f"{ENV_PREFIX}CLIENT_ID",
        "client_secret": f"{ENV_PREFIX}CLIENT_SECRET",
        "sheet_id": f"{ENV_PREFIX}SHEET_ID",
    }
    values: dict[str, object] = {}
    missing: list[str] = []
    for field_name, env_name in required.items():
        value = os.environ.get(env_name, "").strip()
        if not value:
            missing.append(env_name)
        values[field_name] = value
    if missing:
        raise FatalSetupError(
            "Missing required configuration: " + ", ".join(missing)
        )

    tokens_file = os.environ.get(f"{ENV_PREFIX}TOKENS_FILE")
    if tokens_file:
        values["tokens_file"] = Path(tokens_file).expanduser()

    timeout = os.environ.get(f"{ENV_PREFIX}REQUEST_TIMEOUT")
    if timeout:
        try:
            values["request_timeout"] = float(timeout)
        except ValueError as exc:
            raise FatalSetupError(
                f"{ENV_PREFIX}REQUEST_TIMEOUT must be a number, got {timeout!r}"
            ) from exc

    values.update({k: v for k, v in overrides.items() if v is not None})
    return UploaderConfig(**values)  # type: ignore[arg-type]


__all__ = [
    "MIN_UPLOAD_BYTES",
    "TOO_SMALL_MESSAGE",
    "DEFAULT_WORKERS",
    "SHEET_NAME",
    "READ_FIRST_COLUMN",
    "READ_LAST_COLUMN",
    "RESULT_COLUMN",
    "ROW_WIDTH",
    "YOUTUBE_CATEGORY_ID",
    "YOUTUBE_PRIVACY",
    "YOUTUBE_URL_PREFIX",
    "CHUNKSIZE",
    "REQUEST_TIMEOUT",
    "SCOPES",
    "TOKENS_DIR",
    "UploaderConfig",
    "load_config",
]
