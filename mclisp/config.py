from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = "@> "
_DEFAULT_TRUTH_NAME = "#T"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    # The prompt may legitimately be whitespace only, so read it raw.
    return os.environ.get('MCLISP_PROMPT', _DEFAULT_PROMPT)


def get_truth_name() -> str:
    return value_from_env('MCLISP_TRUTH_NAME', _DEFAULT_TRUTH_NAME).strip()


def get_max_token_length() -> int:
    """Longest accepted atom token; 0 means unbounded."""
    raw = value_from_env('MCLISP_MAX_TOKEN_LENGTH', '0')
    try:
        limit = int(raw)
    except ValueError:
        # Unparseable limits fall back to unbounded, like unknown log levels.
        return 0
    return max(limit, 0)


def get_log_level() -> int:
    name = value_from_env('MCLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
