"""
Read-only query guard.

Every generated query passes through here before it reaches the store.
Matching is substring-based on the lower-cased text, so a denylisted word
inside a string literal also rejects the query. That false positive is
accepted; do not loosen the check to avoid it.
"""
import logging

from errors import UnsafeQuery

audit_logger = logging.getLogger("claritynow.audit")

DENYLIST: tuple[str, ...] = (
    "insert", "update", "delete", "drop", "alter", "create",
    "truncate", "replace", "exec", "execute", "grant", "revoke",
)


def is_read_only(query: str) -> bool:
    """True only for text that starts with ``select`` and holds no denylisted keyword."""
    normalized = (query or "").strip().lower()
    if not normalized.startswith("select"):
        return False
    return not any(keyword in normalized for keyword in DENYLIST)


def ensure_read_only(query: str) -> str:
    """Return the query unchanged, or raise UnsafeQuery and audit-log the rejected text."""
    if is_read_only(query):
        return query
    audit_logger.warning("Rejected non read-only query: %r", query)
    raise UnsafeQuery(query)
