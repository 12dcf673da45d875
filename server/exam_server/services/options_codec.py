"""
Text encoding of a question's answer options.

Options are stored as a JSON array of strings. Decoding validates the shape
and fails closed: a value that is not a list of strings raises CorruptRecord
instead of returning partial data.
"""
import json
from typing import List, Sequence

from exam_server.errors import CorruptRecord


def encode_options(options: Sequence[str]) -> str:
    if isinstance(options, str) or not all(isinstance(opt, str) for opt in options):
        raise ValueError("options must be a sequence of strings")
    return json.dumps(list(options), ensure_ascii=False)


def decode_options(raw: str) -> List[str]:
    try:
        options = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise CorruptRecord(detail=f"options is not valid JSON: {e}") from e

    if not isinstance(options, list):
        raise CorruptRecord(detail=f"options must be a JSON array, got {type(options).__name__}")
    for index, opt in enumerate(options):
        if not isinstance(opt, str):
            raise CorruptRecord(detail=f"option {index} is {type(opt).__name__}, expected string")
    return options
