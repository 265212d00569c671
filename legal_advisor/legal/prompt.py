from __future__ import annotations

DEFAULT_ADVICE_TYPE = "general"
DEFAULT_CONTEXT = "no additional context"

# The two workflows word their anonymization instruction differently; keep them separate.
ADVICE_CONFIDENTIAL_INSTRUCTION = (
    "This request is confidential - do not include any identifying information in the response."
)
DOCUMENT_CONFIDENTIAL_INSTRUCTION = (
    "This document must be anonymized and not contain any identifying information."
)


def _finish(sentence: str, confidential: bool, instruction: str) -> str:
    if confidential:
        return f"{sentence} {instruction}"
    return sentence


def build_advice_prompt(
    *,
    prompt: str,
    document_type: str | None,
    context: str | None,
    confidential: bool,
) -> str:
    """
    Single instruction for the advice workflow.

    User text is interpolated as-is; the proxy/provider is responsible for any
    prompt-injection hardening.
    """

    sentence = (
        f"As a legal AI advisor, provide {document_type or DEFAULT_ADVICE_TYPE} advice for: "
        f"{prompt}. Context: {context or DEFAULT_CONTEXT}."
    )
    return _finish(sentence, confidential, ADVICE_CONFIDENTIAL_INSTRUCTION)


def build_document_prompt(
    *,
    prompt: str,
    document_type: str,
    context: str | None,
    confidential: bool,
) -> str:
    sentence = (
        f"Generate a professional legal {document_type} document with these requirements: "
        f"{prompt}. Context: {context or DEFAULT_CONTEXT}."
    )
    return _finish(sentence, confidential, DOCUMENT_CONFIDENTIAL_INSTRUCTION)
