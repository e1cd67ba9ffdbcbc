import re
from typing import List, Pattern, Tuple

DEFAULT_KIND = "default"

# First match wins; patterns match anywhere in the lowercased name.
KIND_RULES: List[Tuple[str, Pattern[str]]] = [
    ("ui", re.compile(r"ui|frontend|client|app|dashboard")),
    ("api", re.compile(r"api|gateway|service|svc|backend")),
    ("db", re.compile(r"db|database|store|storage|postgres|mysql|mongo")),
    ("auth", re.compile(r"auth|oauth|identity|login")),
    ("queue", re.compile(r"queue|event|kafka|bus|pubsub")),
    ("cache", re.compile(r"cache|redis|memcached")),
    ("ai", re.compile(r"ai|model|ml|inference|embedding")),
]

KINDS = tuple(kind for kind, _ in KIND_RULES) + (DEFAULT_KIND,)


def classify(name: str) -> str:
    """
    Map a component name to its semantic kind.
    Never fails: unmatched names fall back to "default".
    """
    lowered = name.lower()
    for kind, pattern in KIND_RULES:
        if pattern.search(lowered):
            return kind
    return DEFAULT_KIND
