"""Rendering fetched transcripts as text, JSON, SRT or WebVTT."""

import json
import pprint
from typing import Any, List, Sequence

from ..models import FetchedTranscript, TranscriptSnippet


class UnknownFormatterType(ValueError):
    """Raised when a formatter name is not one of ``FormatterLoader.TYPES``."""

    def __init__(self, formatter_type: str):
        super().__init__(
            f"The format '{formatter_type}' is not supported. "
            f"Choose one of the following formats: {', '.join(FormatterLoader.TYPES)}"
        )


class Formatter:
    """Base class for all formatters."""

    def format_transcript(self, transcript: FetchedTranscript, **kwargs: Any) -> str:
        raise NotImplementedError("Subclass must implement format_transcript")

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **kwargs: Any) -> str:
        raise NotImplementedError("Subclass must implement format_transcripts")


class PrettyPrintFormatter(Formatter):
    def format_transcript(self, transcript: FetchedTranscript, **kwargs: Any) -> str:
        return pprint.pformat(transcript.to_raw_data(), **kwargs)

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **kwargs: Any) -> str:
        return pprint.pformat([transcript.to_raw_data() for transcript in transcripts], **kwargs)


class JSONFormatter(Formatter):
    """Keyword arguments are forwarded to ``json.dumps`` (e.g. ``indent``)."""

    def format_transcript(self, transcript: FetchedTranscript, **kwargs: Any) -> str:
        return json.dumps(transcript.to_raw_data(), **kwargs)

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **kwargs: Any) -> str:
        return json.dumps([transcript.to_raw_data() for transcript in transcripts], **kwargs)


class TextFormatter(Formatter):
    """Only the text of each snippet, one per line."""

    def format_transcript(self, transcript: FetchedTranscript, **kwargs: Any) -> str:
        return "\n".join(snippet.text for snippet in transcript)

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **kwargs: Any) -> str:
        return "\n\n\n".join(self.format_transcript(transcript, **kwargs) for transcript in transcripts)


class _TextBasedFormatter(TextFormatter):
    """Shared cue logic for SRT and WebVTT."""

    def _format_timestamp(self, hours: int, mins: int, secs: int, ms: int) -> str:
        raise NotImplementedError

    def _format_transcript_header(self, lines: List[str]) -> str:
        raise NotImplementedError

    def _format_transcript_helper(self, i: int, time_text: str, snippet: TranscriptSnippet) -> str:
        raise NotImplementedError

    def _seconds_to_timestamp(self, time: float) -> str:
        total_ms = int(round(float(time) * 1000))
        hours, remainder = divmod(total_ms, 3_600_000)
        mins, remainder = divmod(remainder, 60_000)
        secs, ms = divmod(remainder, 1000)
        return self._format_timestamp(hours, mins, secs, ms)

    def format_transcript(self, transcript: FetchedTranscript, **kwargs: Any) -> str:
        lines = []
        snippets = list(transcript)

        for i, snippet in enumerate(snippets):
            end = snippet.start + snippet.duration
            # Clamp to the next cue so overlapping captions don't stack up
            if i < len(snippets) - 1 and snippets[i + 1].start < end:
                end = snippets[i + 1].start

            time_text = f"{self._seconds_to_timestamp(snippet.start)} --> {self._seconds_to_timestamp(end)}"
            lines.append(self._format_transcript_helper(i, time_text, snippet))

        return self._format_transcript_header(lines)


class SRTFormatter(_TextBasedFormatter):
    def _format_timestamp(self, hours: int, mins: int, secs: int, ms: int) -> str:
        return f"{hours:02d}:{mins:02d}:{secs:02d},{ms:03d}"

    def _format_transcript_header(self, lines: List[str]) -> str:
        return "\n\n".join(lines) + "\n"

    def _format_transcript_helper(self, i: int, time_text: str, snippet: TranscriptSnippet) -> str:
        return f"{i + 1}\n{time_text}\n{snippet.text}"


class WebVTTFormatter(_TextBasedFormatter):
    def _format_timestamp(self, hours: int, mins: int, secs: int, ms: int) -> str:
        return f"{hours:02d}:{mins:02d}:{secs:02d}.{ms:03d}"

    def _format_transcript_header(self, lines: List[str]) -> str:
        return "WEBVTT\n\n" + "\n\n".join(lines) + "\n"

    def _format_transcript_helper(self, i: int, time_text: str, snippet: TranscriptSnippet) -> str:
        return f"{time_text}\n{snippet.text}"


class FormatterLoader:
    TYPES = {
        "json": JSONFormatter,
        "pretty": PrettyPrintFormatter,
        "text": TextFormatter,
        "webvtt": WebVTTFormatter,
        "srt": SRTFormatter,
    }

    def load(self, formatter_type: str = "pretty") -> Formatter:
        """Instantiate the formatter registered under ``formatter_type``."""
        if formatter_type not in self.TYPES:
            raise UnknownFormatterType(formatter_type)
        return self.TYPES[formatter_type]()
