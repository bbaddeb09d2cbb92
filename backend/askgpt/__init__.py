"""Ask a hosted chat model a question and keep the answer in a local store."""
from __future__ import annotations

__version__ = "0.1.0"
