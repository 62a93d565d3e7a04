"""
Canonical Hashing Layer
Single source of truth for assessment audit hashes.
"""

import hashlib
import json
from typing import Any, Dict, Mapping, List, Union

HASH_PREFIX = "sha256:"


def canonicalize(obj: Any) -> str:
    """
    Convert object to canonical JSON string.
    Deterministic: same input always produces same output.
    """
    def _clean(o: Any) -> Any:
        if isinstance(o, dict):
            return {str(k): _clean(v) for k, v in sorted(o.items(), key=lambda kv: str(kv[0]))}
        elif isinstance(o, (list, tuple)):
            return [_clean(i) for i in o]
        elif hasattr(o, "value") and isinstance(getattr(o, "value"), (str, int)):
            # Enum members hash by value
            return o.value
        return o

    cleaned = _clean(obj)
    return json.dumps(cleaned, sort_keys=True, separators=(',', ':'), ensure_ascii=True)


def canonicalize_and_hash(obj: Any) -> str:
    """
    Returns: "sha256:<64-char-hex>"
    """
    canonical = canonicalize(obj)
    digest = hashlib.sha256(canonical.encode('utf-8')).hexdigest()
    return f"{HASH_PREFIX}{digest}"


def normalize_answers(answers: Mapping[str, Any]) -> Dict[str, List[str]]:
    """
    Normalize an answer set for hashing.

    Unanswered questions are dropped and selections are sorted. Repeated
    ids are kept: each one is scored.
    """
    normalized: Dict[str, List[str]] = {}
    for question_id, value in answers.items():
        if not value:
            continue
        picked: List[str] = [value] if isinstance(value, str) else list(value)
        if picked:
            normalized[question_id] = sorted(picked)
    return normalized


def hash_answers(answers: Mapping[str, Union[str, List[str], None]]) -> str:
    return canonicalize_and_hash(normalize_answers(answers))
