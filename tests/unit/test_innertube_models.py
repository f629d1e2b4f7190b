"""Unit tests for the player API response models."""

from youtube_captions.models import CaptionTrackData, PlayabilityStatus, PlayerResponse


class TestPlayerResponse:
    """Tests for PlayerResponse.from_dict."""

    def test_parses_tracks_and_translation_languages(self, sample_player_response):
        # Act
        response = PlayerResponse.from_dict(sample_player_response)

        # Assert
        assert response.playability_status.status == "OK"
        tracks = response.captions.caption_tracks
        assert [track.language_code for track in tracks] == ["en", "es"]
        assert tracks[0].name == "English"
        assert tracks[0].is_translatable is True
        assert tracks[0].is_generated is False
        assert tracks[1].is_generated is True
        assert [lang.language_code for lang in response.captions.translation_languages] == ["de", "fr"]
        assert response.captions.translation_languages[0].language == "German"

    def test_missing_captions_object(self):
        response = PlayerResponse.from_dict({"playabilityStatus": {"status": "OK"}})

        assert response.captions is None

    def test_renderer_without_caption_tracks(self):
        """A renderer that lacks the captionTracks key counts as no captions."""
        data = {"captions": {"playerCaptionsTracklistRenderer": {"translationLanguages": []}}}

        assert PlayerResponse.from_dict(data).captions is None

    def test_empty_caption_tracks_list(self):
        data = {"captions": {"playerCaptionsTracklistRenderer": {"captionTracks": []}}}

        captions = PlayerResponse.from_dict(data).captions

        assert captions is not None
        assert captions.caption_tracks == []
        assert captions.translation_languages == []

    def test_missing_playability_status(self):
        assert PlayerResponse.from_dict({}).playability_status is None


class TestPlayabilityStatus:
    def test_sub_reasons_from_error_screen(self):
        # Arrange
        data = {
            "status": "ERROR",
            "reason": "Video unavailable",
            "errorScreen": {
                "playerErrorMessageRenderer": {
                    "subreason": {"runs": [{"text": "first"}, {"text": "second"}]},
                },
            },
        }

        # Act
        status = PlayabilityStatus.from_dict(data)

        # Assert
        assert status.status == "ERROR"
        assert status.reason == "Video unavailable"
        assert status.sub_reasons == ["first", "second"]

    def test_no_error_screen(self):
        status = PlayabilityStatus.from_dict({"status": "LOGIN_REQUIRED"})

        assert status.reason is None
        assert status.sub_reasons == []


class TestCaptionTrackData:
    def test_simple_text_name(self):
        track = CaptionTrackData.from_dict({
            "baseUrl": "https://example.com/cc",
            "name": {"simpleText": "Deutsch"},
            "languageCode": "de",
        })

        assert track.name == "Deutsch"
        assert track.kind == ""
        assert track.is_translatable is False
        assert track.is_generated is False
