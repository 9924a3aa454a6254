from unittest.mock import MagicMock

from sheet_uploader.integrations.youtube import upload as yt_upload
from sheet_uploader.interfaces.job import JobDescriptor
from sheet_uploader.interfaces.outcome import Failure, OutcomeStatus, Success


def _job(path, keywords="a,b,c"):
    return JobDescriptor(
        file_path=str(path),
        title="1997.06.07 BEAC 97",
        description="apu/Kicsi_40.mpg: 0:01.09-4:55.08",
        category_id="22",
        keywords=keywords,
    )


def _client(response=None, error=None):
    youtube = MagicMock()
    request = youtube.videos.return_value.insert.return_value
    if error is not None:
        request.next_chunk.side_effect = error
    else:
        request.next_chunk.return_value = (None, response)
    client = MagicMock()
    client.youtube.return_value = youtube
    return client, youtube


def test_body_includes_split_tags(tmp_path):
    body = yt_upload.build_request_body(_job(tmp_path / "v.mpg", "a,b,c"))
    assert body["snippet"]["tags"] == ["a", "b", "c"]
    assert body["snippet"]["categoryId"] == "22"
    assert body["status"] == {"privacyStatus": "private"}


def test_body_omits_tags_when_keywords_blank(tmp_path):
    for keywords in ("", "   "):
        body = yt_upload.build_request_body(_job(tmp_path / "v.mpg", keywords))
        assert "tags" not in body["snippet"]


def test_upload_job_success(tmp_path):
    video = tmp_path / "v.mpg"
    video.write_bytes(b"data")
    client, youtube = _client({"id": "abc123"})

    outcome = yt_upload.upload_job(client, _job(video), privacy="unlisted")

    assert outcome == Success("abc123")
    assert outcome.status is OutcomeStatus.SUCCESS
    kwargs = youtube.videos.return_value.insert.call_args.kwargs
    assert kwargs["part"] == "snippet,status"
    assert kwargs["body"]["status"]["privacyStatus"] == "unlisted"
    assert kwargs["body"]["snippet"]["title"] == "1997.06.07 BEAC 97"


def test_upload_job_missing_file_is_failure(tmp_path):
    client, youtube = _client({"id": "never"})
    outcome = yt_upload.upload_job(client, _job(tmp_path / "missing.mpg"))
    assert isinstance(outcome, Failure)
    assert "missing.mpg" in outcome.reason
    youtube.videos.return_value.insert.assert_not_called()


def test_upload_job_api_error_is_failure(tmp_path):
    video = tmp_path / "v.mpg"
    video.write_bytes(b"data")
    client, _ = _client(error=RuntimeError("quota exceeded"))
    outcome = yt_upload.upload_job(client, _job(video))
    assert isinstance(outcome, Failure)
    assert "quota exceeded" in outcome.reason


def test_upload_job_without_id_is_failure(tmp_path):
    video = tmp_path / "v.mpg"
    video.write_bytes(b"data")
    client, _ = _client({})
    assert isinstance(yt_upload.upload_job(client, _job(video)), Failure)
