from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .completion import Message
from .errors import InputError

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(f"File {p} does not exist") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Error reading {p}: {e}") from e


def _with_file(question: str, path: PathLike) -> str:
    p = Path(path)
    body = read_text(p).rstrip("\n")
    return f"{question}\n\n--- {p.name} ---\n{body}\n---"


def build_messages(
    question: str,
    example_prompt: Optional[PathLike] = None,
    example_response: Optional[PathLike] = None,
    file_to_analyze: Optional[PathLike] = None,
) -> List[Message]:
    """
    Compose the chat messages for one question.

    With an example prompt/response pair the model first sees that exchange
    as a one-shot demonstration. With a file to analyze, its content is
    appended to the final user message.
    """
    if (example_prompt is None) != (example_response is None):
        raise InputError("-example_prompt and -example_response must be given together")

    messages: List[Message] = []
    if example_prompt is not None:
        messages.append(Message(role="user", content=read_text(example_prompt)))
        messages.append(Message(role="assistant", content=read_text(example_response)))

    content = question if file_to_analyze is None else _with_file(question, file_to_analyze)
    messages.append(Message(role="user", content=content))
    return messages
