"""Idempotency check for regenerated files."""


def is_current(existing: str | None, fresh: str) -> bool:
    """
    True if persisted text matches freshly generated text exactly.

    Formatting differences count as drift. Missing output (None) is never
    current.
    """
    if existing is None:
        return False
    return existing == fresh
