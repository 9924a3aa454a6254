# sheet_uploader/integrations/youtube/upload.py

from __future__ import annotations

import logging
import mimetypes
from typing import Any, Dict

from googleapiclient.http import MediaFileUpload

from ...config import CHUNKSIZE, YOUTUBE_PRIVACY
from ...interfaces.job import JobDescriptor
from ...interfaces.outcome import Failure, Success, UploadOutcome

logger = logging.getLogger(__name__)


def build_request_body(job: JobDescriptor, privacy: str = YOUTUBE_PRIVACY) -> Dict[str, Any]:
    """Return the ``videos.insert`` body for ``job``.

    The API answers 400 Bad Request when ``tags`` is empty, so the field is
    only present when the keywords contain something.
    """
    snippet: Dict[str, Any] = {
        "title": job.title,
        "description": job.description,
        "categoryId": job.category_id,
    }
    tags = job.tags
    if tags:
        snippet["tags"] = tags
    return {
        "snippet": snippet,
        "status": {"privacyStatus": privacy},
    }


def upload_video(youtube, job: JobDescriptor, privacy: str = YOUTUBE_PRIVACY) -> Dict[str, Any]:
    """Stream ``job.file_path`` to YouTube and return the API response."""
    media = MediaFileUpload(
        filename=job.file_path,
        mimetype=mimetypes.guess_type(job.file_path)[0] or "video/*",
        chunksize=CHUNKSIZE,
        resumable=True,
    )
    request = youtube.videos().insert(
        part="snippet,status",
        body=build_request_body(job, privacy),
        media_body=media,
    )

    response = None
    while response is None:
        status, response = request.next_chunk()
        if status:
            logger.debug("%s: %d%%", job.file_path, int(status.progress() * 100))
    return response


def upload_job(client, job: JobDescriptor, privacy: str = YOUTUBE_PRIVACY) -> UploadOutcome:
    """Upload ``job`` with ``client`` and report the outcome as data.

    Errors opening the file or talking to the API never escape; they become a
    :class:`Failure` carrying the error text.
    """
    try:
        response = upload_video(client.youtube(), job, privacy)
    except Exception as exc:
        return Failure(f"Error uploading {job.file_path}: {exc}")

    video_id = (response or {}).get("id")
    if not video_id:
        return Failure(f"YouTube returned no video id for {job.file_path}")
    return Success(video_id)


__all__ = ["build_request_body", "upload_job", "upload_video"]
