"""Validation of contexts in XBRL instances, with a streaming path for large files."""

from __future__ import annotations

from xbrlkit.contexts import (
    ContextError,
    ContextSet,
    get_dimensional_members,
    parse_contexts,
)
from xbrlkit.report_types import ValidationFinding
from xbrlkit.stream import (
    FactHandler,
    StreamError,
    StreamingContext,
    StreamingFact,
    XbrlStreamReader,
)

DEFAULT_STREAMING_THRESHOLD_MB = 100


def validate_contexts(xbrl_xml: str) -> tuple[ContextSet, list[ValidationFinding]]:
    """Parse the contexts of an instance and report on each of them.

    Raises ValueError if the contexts cannot be parsed.
    """
    try:
        context_set = parse_contexts(xbrl_xml)
    except ContextError as exc:
        raise ValueError(f"Failed to parse contexts: {exc}") from exc

    findings: list[ValidationFinding] = []
    for context in context_set:
        if not context.entity.value:
            findings.append(
                ValidationFinding(
                    rule_id="XBRL.CONTEXT.MISSING_ENTITY",
                    severity="error",
                    message=f"Context {context.id} has no entity identifier",
                    subject=context.id,
                )
            )
        dim_count = len(get_dimensional_members(context))
        if dim_count > 0:
            findings.append(
                ValidationFinding(
                    rule_id="XBRL.CONTEXT.HAS_DIMENSIONS",
                    severity="info",
                    message=f"Context {context.id} has {dim_count} dimensional members",
                    subject=context.id,
                )
            )
    return context_set, findings


class _CompletenessHandler(FactHandler):
    def __init__(self) -> None:
        self.facts: list[StreamingFact] = []
        self.contexts: set[str] = set()

    def on_fact(self, fact: StreamingFact) -> None:
        self.facts.append(fact)

    def on_context(self, context: StreamingContext) -> None:
        self.contexts.add(context.id)


def validate_context_completeness_streaming(
    xbrl_xml: str, size_threshold_mb: int = DEFAULT_STREAMING_THRESHOLD_MB
) -> list[ValidationFinding]:
    """Report facts referring to undefined contexts, reading the document as a stream.

    A document that cannot be read yields a single parse-error finding.
    """
    try:
        handler = XbrlStreamReader(xbrl_xml, _CompletenessHandler()).parse()
    except StreamError as exc:
        return [
            ValidationFinding(
                rule_id="XBRL.STREAM_PARSE_ERROR",
                severity="error",
                message=f"Streaming parse failed: {exc}",
            )
        ]

    return [
        ValidationFinding(
            rule_id="XBRL.CONTEXT.MISSING_REF",
            severity="error",
            message=(
                f"Fact '{fact.concept}' references undefined context "
                f"'{fact.context_ref}'"
            ),
            subject=fact.context_ref,
        )
        for fact in handler.facts
        if fact.context_ref not in handler.contexts
    ]


def should_use_streaming(content_size_bytes: int, threshold_mb: int | None = None) -> bool:
    """Whether content of this size is over the streaming threshold (100 MB by default)."""
    threshold = DEFAULT_STREAMING_THRESHOLD_MB if threshold_mb is None else threshold_mb
    return content_size_bytes > threshold * 1024 * 1024