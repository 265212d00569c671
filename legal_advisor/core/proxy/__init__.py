"""Outbound integration with the AI proxy.

- One call per invocation; no retries, no backoff.
- No prompt/output logging (prompts may carry client confidences).
- Every inbound response passes through the header sanitizer first.
"""
