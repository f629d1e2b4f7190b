from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


@dataclass(frozen=True)
class TranslationLanguage:
    """A language a translatable caption track can be machine-translated into."""
    language: str
    language_code: str


@dataclass(frozen=True)
class TranscriptSnippet:
    """Represents a single timed piece of caption text."""
    text: str
    start: float
    duration: float = 0.0

    @property
    def end(self) -> float:
        """Calculate end time of the snippet."""
        return self.start + self.duration

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "start": self.start,
            "duration": self.duration
        }


@dataclass
class FetchedTranscript:
    """The parsed payload of one caption track."""
    video_id: str
    language: str
    language_code: str
    is_generated: bool
    snippets: List[TranscriptSnippet] = field(default_factory=list)

    def __iter__(self) -> Iterator[TranscriptSnippet]:
        return iter(self.snippets)

    def __getitem__(self, index: int) -> TranscriptSnippet:
        return self.snippets[index]

    def __len__(self) -> int:
        return len(self.snippets)

    @property
    def text(self) -> str:
        """Get plain text transcript with all snippets joined."""
        return " ".join(snippet.text for snippet in self.snippets)

    def to_raw_data(self) -> List[Dict[str, Any]]:
        """Return the snippets as a list of ``{text, start, duration}`` dicts."""
        return [snippet.to_dict() for snippet in self.snippets]
