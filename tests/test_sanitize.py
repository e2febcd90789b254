import pytest
from pydantic import ValidationError as PydanticValidationError

from reel_downloader.errors import NoMediaAvailable
from reel_downloader.sanitize import (
    UNREADABLE_MEDIA_LIST,
    SanitizedMedia,
    build_reel_result,
    sanitize_medias,
)

SOURCE = "https://www.instagram.com/reel/ABC123/"


class TestSanitizeMedias:

    def test_drops_malformed_candidates_and_keeps_order(self):
        raw = [
            {"url": "https://cdn/1.mp4", "type": "video"},
            {"type": "video"},
            {"url": "https://cdn/2.mp4"},
            {"url": 12, "type": "video"},
            {"url": "https://cdn/3.mp4", "type": None},
            {"url": "", "type": "video"},
            "https://cdn/4.mp4",
            None,
            {"url": "https://cdn/5.jpg", "type": "image"},
        ]
        medias = sanitize_medias(raw)
        assert [m.url for m in medias] == ["https://cdn/1.mp4", "https://cdn/5.jpg"]

    def test_optional_fields_kept_only_when_strings(self):
        medias = sanitize_medias([
            {"url": "u1", "type": "video", "quality": "720p", "extension": "mp4"},
            {"url": "u2", "type": "video", "quality": 720, "extension": ["mp4"]},
        ])
        assert medias[0].quality == "720p"
        assert medias[0].extension == "mp4"
        assert medias[1].quality is None
        assert medias[1].extension is None

    def test_any_non_empty_type_is_accepted(self):
        medias = sanitize_medias([{"url": "u", "type": "carousel"}])
        assert medias[0].type == "carousel"

    @pytest.mark.parametrize("raw", [None, {}, "medias", 3])
    def test_non_list_yields_nothing(self, raw):
        assert sanitize_medias(raw) == []

    def test_sanitized_media_never_built_without_url_and_type(self):
        with pytest.raises(PydanticValidationError):
            SanitizedMedia.model_validate({"url": "u"})
        with pytest.raises(PydanticValidationError):
            SanitizedMedia.model_validate({"url": 1, "type": "video"})


class TestBuildReelResult:

    @pytest.mark.parametrize("payload", [
        {},
        {"medias": []},
        {"medias": None},
        {"medias": {"url": "u", "type": "video"}},
        [],
        "oops",
    ])
    def test_absent_or_empty_medias(self, payload):
        with pytest.raises(NoMediaAvailable) as exc_info:
            build_reel_result(payload, SOURCE)
        assert exc_info.value.status == 404

    def test_all_candidates_invalid(self):
        with pytest.raises(NoMediaAvailable) as exc_info:
            build_reel_result({"medias": [{"url": "u"}, {"type": "video"}]}, SOURCE)
        assert exc_info.value.message == UNREADABLE_MEDIA_LIST
        assert exc_info.value.status == 404

    def test_full_payload_round_trip(self, upstream_payload):
        result = build_reel_result(upstream_payload, SOURCE)
        assert result.to_dict() == {
            "sourceUrl": SOURCE,
            "author": "creator_handle",
            "title": "Sunset timelapse",
            "duration": 42.5,
            "thumbnail": "https://cdn.example.com/thumb.jpg",
            "medias": [
                {"url": "https://cdn.example.com/480.mp4", "type": "video", "quality": "480p", "extension": "mp4"},
                {"url": "https://cdn.example.com/720.mp4", "type": "video", "quality": "720p", "extension": "mp4"},
                {"url": "https://cdn.example.com/cover.jpg", "type": "image", "extension": "jpg"},
            ],
        }

    def test_wrong_typed_fields_are_omitted_not_coerced(self):
        payload = {
            "url": 123,
            "author": {"name": "x"},
            "title": 5,
            "thumbnail": None,
            "duration": "42",
            "extra": "ignored",
            "medias": [{"url": "u", "type": "video", "quality": 1080}],
        }
        assert build_reel_result(payload, SOURCE).to_dict() == {
            "sourceUrl": SOURCE,
            "medias": [{"url": "u", "type": "video"}],
        }

    def test_empty_upstream_source_url_is_kept(self):
        result = build_reel_result({"url": "", "medias": [{"url": "u", "type": "video"}]}, SOURCE)
        assert result.to_dict()["sourceUrl"] == ""

    def test_upstream_source_url_wins_when_present(self):
        result = build_reel_result({"url": "https://instagram.com/p/canon", "medias": [{"url": "u", "type": "video"}]}, SOURCE)
        assert result.source_url == "https://instagram.com/p/canon"

    @pytest.mark.parametrize("duration, expected", [
        (30, 30),
        (0, 0),
        (12.75, 12.75),
        (-3, None),
        (True, None),
        (float("nan"), None),
        (float("inf"), None),
    ])
    def test_duration_guard(self, duration, expected):
        result = build_reel_result({"duration": duration, "medias": [{"url": "u", "type": "video"}]}, SOURCE)
        assert result.duration == expected
