"""Transcript serialization.

Turns a structured conversation history into the markdown blob that is
persisted, e.g.:

    ### Human
    *2024-05-01 09:30:00*
    Hi

    ---

    ### Assistant
    Hello
"""

from datetime import datetime
from typing import Optional, Sequence

from ..errors import InvalidTranscriptError
from ..models.conversation import ConversationTurn

ROLE_HEADERS = {
    "human": "### Human",
    "assistant": "### Assistant",
}
TURN_SEPARATOR = "\n\n---\n\n"


def format_timestamp(timestamp: str) -> str:
    """Render an ISO-8601 timestamp as 'YYYY-MM-DD HH:MM:SS', or return it unchanged."""
    value = timestamp.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return timestamp


def render_turn(turn: ConversationTurn) -> str:
    lines = [ROLE_HEADERS[turn.role]]
    if turn.timestamp:
        lines.append(f"*{format_timestamp(turn.timestamp)}*")
    lines.append(turn.content)
    return "\n".join(lines)


def with_title(transcript: str, title: Optional[str]) -> str:
    if not title:
        return transcript
    return f"# {title}\n\n{transcript}"


def render_transcript(turns: Sequence[ConversationTurn], title: Optional[str] = None) -> str:
    """
    Serialize turns in order into a single transcript.

    Args:
        turns: Conversation turns, oldest first
        title: Optional title line

    Returns:
        Transcript text

    Raises:
        InvalidTranscriptError: If there are no turns
    """
    if not turns:
        raise InvalidTranscriptError("conversation_history must contain at least one turn")
    return with_title(TURN_SEPARATOR.join(render_turn(turn) for turn in turns), title)


def normalize_transcript(
    text: Optional[str] = None,
    turns: Optional[Sequence[ConversationTurn]] = None,
    title: Optional[str] = None
) -> str:
    """
    Produce the transcript to persist from flat text or structured turns.

    Structured turns win when both are given.

    Raises:
        InvalidTranscriptError: If neither a non-blank text nor a non-empty
            turn sequence is supplied, or the text holds lone surrogates
    """
    if turns is not None:
        transcript = render_transcript(turns, title)
    elif text is None or not text.strip():
        raise InvalidTranscriptError("conversation_text must be a non-empty string")
    else:
        transcript = with_title(text, title)

    try:
        transcript.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidTranscriptError(f"transcript is not valid UTF-8 text at position {e.start}")
    return transcript
