from __future__ import annotations

ATTRIBUTION = "Generated by Legal AI Advisor"
DISCLAIMER = (
    "DISCLAIMER: This document was generated by AI and should be reviewed by a "
    "qualified legal professional before use."
)


def format_document(*, content: str, document_type: str, timestamp_ns: int) -> str:
    """Wrap raw model output in the standard document template."""

    return (
        f"LEGAL DOCUMENT: {document_type.upper()}\n\n"
        f"{content}\n\n"
        "---\n"
        f"{ATTRIBUTION}\n"
        f"Timestamp: {timestamp_ns}\n\n"
        f"{DISCLAIMER}"
    )
