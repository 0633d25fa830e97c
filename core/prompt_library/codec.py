"""Encoding and decoding of persisted library state.

Prompts are stored as a UTF-8 JSON array of records; categories as a UTF-8
JSON array of strings.

Updates:
  v0.1.0 - 2026-10-07 - Introduce JSON codec for prompt and category blobs.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import cast

from models.prompt_model import Prompt

from ..exceptions import PromptDecodeError

__all__ = [
    "decode_categories",
    "decode_prompts",
    "encode_categories",
    "encode_prompts",
]


def encode_prompts(prompts: Sequence[Prompt]) -> bytes:
    """Serialise *prompts* into a JSON blob."""
    payload = [prompt.to_record() for prompt in prompts]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def encode_categories(categories: Sequence[str]) -> bytes:
    """Serialise the category list into a JSON blob."""
    return json.dumps(list(categories), ensure_ascii=False).encode("utf-8")


def _load_json_array(blob: bytes, label: str) -> list[object]:
    try:
        parsed: object = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PromptDecodeError(f"Stored {label} are not valid JSON") from exc
    if not isinstance(parsed, list):
        raise PromptDecodeError(f"Stored {label} must be a JSON array")
    return cast("list[object]", parsed)


def decode_prompts(blob: bytes) -> list[Prompt]:
    """Return the prompts stored in *blob*.

    The blob decodes as a whole: a single malformed record rejects the list.
    """
    prompts: list[Prompt] = []
    for index, entry in enumerate(_load_json_array(blob, "prompts")):
        if not isinstance(entry, Mapping):
            raise PromptDecodeError(f"Prompt record {index} is not an object")
        try:
            prompts.append(Prompt.from_record(cast("Mapping[str, object]", entry)))
        except (KeyError, TypeError, ValueError) as exc:
            raise PromptDecodeError(f"Prompt record {index} is invalid: {exc}") from exc
    return prompts


def decode_categories(blob: bytes) -> list[str]:
    """Return the category labels stored in *blob*."""
    entries = _load_json_array(blob, "categories")
    if not all(isinstance(entry, str) for entry in entries):
        raise PromptDecodeError("Stored categories must be strings")
    return cast("list[str]", entries)
