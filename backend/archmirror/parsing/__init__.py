from archmirror.parsing.classifier import classify, KINDS, DEFAULT_KIND
from archmirror.parsing.extractor import extract, title_case, dedupe_edges

__all__ = [
    "classify",
    "KINDS",
    "DEFAULT_KIND",
    "extract",
    "title_case",
    "dedupe_edges",
]
