"""Event-driven XBRL parsing for filings too large to load as a tree."""

from __future__ import annotations

import io
import xml.sax
import xml.sax.handler
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import IO, Generic, TypeVar, Union

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StreamingFact:
    """A fact as found in the stream; ``concept`` is the tag name as written."""

    concept: str
    context_ref: str
    unit_ref: str | None = None
    decimals: str | None = None
    value: str = ""


@dataclass(frozen=True)
class StreamingPeriod:
    """An instant, a duration, or unknown when neither is set."""

    instant: str | None = None
    start: str | None = None
    end: str | None = None

    @property
    def is_instant(self) -> bool:
        return self.instant is not None

    @property
    def is_duration(self) -> bool:
        return self.instant is None and self.start is not None and self.end is not None

    @property
    def is_unknown(self) -> bool:
        return not (self.is_instant or self.is_duration)


@dataclass(frozen=True)
class StreamingContext:
    """A context definition found in the stream."""

    id: str
    entity_scheme: str | None = None
    entity_value: str | None = None
    period: StreamingPeriod = field(default_factory=StreamingPeriod)


@dataclass(frozen=True)
class StreamingUnit:
    """A unit definition found in the stream."""

    id: str
    measure: str | None = None


class FactHandler(ABC):
    """Receives facts, contexts and units as the stream is read."""

    @abstractmethod
    def on_fact(self, fact: StreamingFact) -> None:
        """Called once a fact element is complete."""

    def on_context(self, context: StreamingContext) -> None:
        """Called once a context element is complete; ignored by default."""

    def on_unit(self, unit: StreamingUnit) -> None:
        """Called once a unit element is complete; ignored by default."""


class StreamError(Exception):
    """Streaming parse failed."""


class StreamXmlError(StreamError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"XML parsing error: {detail}")
        self.detail = detail


class StreamStructureError(StreamError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Structure error: {detail}")
        self.detail = detail


class StreamHandlerError(StreamError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Handler error: {cause}")
        self.cause = cause


@dataclass
class _FactBuilder:
    concept: str
    context_ref: str
    unit_ref: str | None
    decimals: str | None
    value: str = ""

    def build(self) -> StreamingFact:
        return StreamingFact(
            concept=self.concept,
            context_ref=self.context_ref,
            unit_ref=self.unit_ref,
            decimals=self.decimals,
            value=self.value.strip(),
        )


@dataclass
class _ContextBuilder:
    id: str
    entity_scheme: str | None = None
    entity_value: str | None = None
    period_start: str | None = None
    period_end: str | None = None
    period_instant: str | None = None

    def build(self) -> StreamingContext:
        if self.period_instant is not None:
            period = StreamingPeriod(instant=self.period_instant)
        elif self.period_start is not None and self.period_end is not None:
            period = StreamingPeriod(start=self.period_start, end=self.period_end)
        else:
            period = StreamingPeriod()
        return StreamingContext(
            id=self.id,
            entity_scheme=self.entity_scheme,
            entity_value=self.entity_value,
            period=period,
        )


@dataclass
class _UnitBuilder:
    id: str
    measure: str | None = None

    def build(self) -> StreamingUnit:
        return StreamingUnit(id=self.id, measure=self.measure)


def _is_context_tag(name: str) -> bool:
    return name == "xbrli:context" or name.endswith(":context")


def _is_unit_tag(name: str) -> bool:
    return name == "xbrli:unit" or name.endswith(":unit")


def _is_fact_end(end_name: str, concept: str) -> bool:
    if end_name == concept:
        return True
    parts = concept.split(":")
    return len(parts) > 1 and end_name.endswith(f":{parts[1]}")


H = TypeVar("H", bound=FactHandler)


class _Events(xml.sax.handler.ContentHandler, Generic[H]):
    def __init__(self, handler: H) -> None:
        super().__init__()
        self.handler = handler
        self._text: list[str] = []
        self._fact: _FactBuilder | None = None
        self._context: _ContextBuilder | None = None
        self._unit: _UnitBuilder | None = None

    def _flush_text(self) -> None:
        text = "".join(self._text).strip()
        self._text.clear()
        if text and self._fact is not None:
            self._fact.value += text

    def _deliver(self, callback, item) -> None:
        try:
            callback(item)
        except Exception as exc:
            raise StreamHandlerError(exc) from exc

    def characters(self, content: str) -> None:
        self._text.append(content)

    def startElement(self, name: str, attrs) -> None:
        self._flush_text()
        context_ref = attrs.get("contextRef")
        if context_ref is not None:
            self._fact = _FactBuilder(
                concept=name,
                context_ref=context_ref,
                unit_ref=attrs.get("unitRef"),
                decimals=attrs.get("decimals"),
            )
        element_id = attrs.get("id")
        if element_id is not None:
            if _is_context_tag(name):
                self._context = _ContextBuilder(id=element_id)
            if _is_unit_tag(name):
                self._unit = _UnitBuilder(id=element_id)

    def endElement(self, name: str) -> None:
        self._flush_text()
        if self._fact is not None and _is_fact_end(name, self._fact.concept):
            fact, self._fact = self._fact, None
            self._deliver(self.handler.on_fact, fact.build())
        if _is_context_tag(name) and self._context is not None:
            context, self._context = self._context, None
            self._deliver(self.handler.on_context, context.build())
        if _is_unit_tag(name) and self._unit is not None:
            unit, self._unit = self._unit, None
            self._deliver(self.handler.on_unit, unit.build())


Source = Union[str, bytes, IO[str], IO[bytes]]


class XbrlStreamReader(Generic[H]):
    """Reads an XBRL document piece by piece, calling the handler as it goes."""

    def __init__(self, source: Source, handler: H) -> None:
        if isinstance(source, (str, bytes)):
            source = io.StringIO(source) if isinstance(source, str) else io.BytesIO(source)
        self._source = source
        self._handler = handler

    def parse(self) -> H:
        """Parse the whole document and return the handler."""
        events = _Events(self._handler)
        parser = xml.sax.make_parser()
        parser.setFeature(xml.sax.handler.feature_namespaces, False)
        parser.setFeature(xml.sax.handler.feature_external_ges, False)
        parser.setContentHandler(events)
        try:
            while chunk := self._source.read(_CHUNK_SIZE):
                parser.feed(chunk)
            parser.close()
        except xml.sax.SAXException as exc:
            raise StreamXmlError(str(exc)) from exc
        return self._handler