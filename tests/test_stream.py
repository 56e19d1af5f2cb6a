import io

import pytest

from xbrlkit.stream import (
    FactHandler,
    StreamHandlerError,
    StreamingContext,
    StreamingFact,
    StreamingUnit,
    StreamXmlError,
    XbrlStreamReader,
)


class CollectingHandler(FactHandler):
    def __init__(self):
        self.facts: list[StreamingFact] = []
        self.contexts: list[StreamingContext] = []
        self.units: list[StreamingUnit] = []

    def on_fact(self, fact):
        self.facts.append(fact)

    def on_context(self, context):
        self.contexts.append(context)

    def on_unit(self, unit):
        self.units.append(unit)


class FactsOnlyHandler(FactHandler):
    def __init__(self):
        self.facts = []

    def on_fact(self, fact):
        self.facts.append(fact)


class FailingHandler(FactHandler):
    def on_fact(self, fact):
        raise ValueError("rejected")


def parse(xml):
    return XbrlStreamReader(xml, CollectingHandler()).parse()


def test_parses_simple_fact():
    xml = """<?xml version="1.0"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance" xmlns:us-gaap="http://fasb.org/us-gaap/2023">
    <us-gaap:Revenue contextRef="ctx-1" unitRef="usd" decimals="-3">12345000</us-gaap:Revenue>
</xbrl>
"""
    handler = parse(xml)
    assert len(handler.facts) == 1
    fact = handler.facts[0]
    assert fact.concept == "us-gaap:Revenue"
    assert fact.context_ref == "ctx-1"
    assert fact.unit_ref == "usd"
    assert fact.decimals == "-3"
    assert fact.value == "12345000"


def test_parses_multiple_facts():
    xml = """<?xml version="1.0"?>
<xbrl xmlns:us-gaap="http://fasb.org/us-gaap/2023">
    <us-gaap:Revenue contextRef="ctx-1" unitRef="usd">1000000</us-gaap:Revenue>
    <us-gaap:Assets contextRef="ctx-1" unitRef="usd">5000000</us-gaap:Assets>
    <us-gaap:Liabilities contextRef="ctx-1" unitRef="usd">2000000</us-gaap:Liabilities>
</xbrl>
"""
    handler = parse(xml)
    assert [f.concept for f in handler.facts] == [
        "us-gaap:Revenue",
        "us-gaap:Assets",
        "us-gaap:Liabilities",
    ]


def test_handles_empty_xbrl():
    xml = """<?xml version="1.0"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance">
</xbrl>
"""
    handler = parse(xml)
    assert handler.facts == []


def test_parses_context_definition():
    xml = """<?xml version="1.0"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance" xmlns:xbrli="http://www.xbrl.org/2003/instance">
    <xbrli:context id="ctx-1">
        <xbrli:entity>
            <xbrli:identifier scheme="http://www.sec.gov/CIK">0000000001</xbrli:identifier>
        </xbrli:entity>
        <xbrli:period>
            <xbrli:instant>2023-09-30</xbrli:instant>
        </xbrli:period>
    </xbrli:context>
</xbrl>
"""
    handler = parse(xml)
    assert len(handler.contexts) == 1
    assert handler.contexts[0].id == "ctx-1"
    assert handler.contexts[0].period.is_unknown


def test_parses_unit_definition():
    xml = """<?xml version="1.0"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance" xmlns:xbrli="http://www.xbrl.org/2003/instance">
    <xbrli:unit id="usd">
        <xbrli:measure>iso4217:USD</xbrli:measure>
    </xbrli:unit>
</xbrl>
"""
    handler = parse(xml)
    assert len(handler.units) == 1
    assert handler.units[0].id == "usd"


def test_unprefixed_context_is_not_reported():
    xml = '<xbrl><context id="c1"><period/></context></xbrl>'
    handler = parse(xml)
    assert handler.contexts == []


def test_fact_value_is_trimmed_and_unescaped():
    xml = '<xbrl><dei:Name contextRef="c1">  A &amp; B  </dei:Name></xbrl>'
    handler = parse(xml)
    assert handler.facts[0].value == "A & B"
    assert handler.facts[0].unit_ref is None
    assert handler.facts[0].decimals is None


def test_fact_closed_with_other_prefix():
    xml = '<xbrl><a:Revenue contextRef="c1">5<b:Revenue/></a:Revenue></xbrl>'
    handler = parse(xml)
    assert len(handler.facts) == 1
    assert handler.facts[0].value == "5"


def test_reads_binary_file_object():
    data = b'<xbrl><us-gaap:Assets contextRef="c2">7</us-gaap:Assets></xbrl>'
    handler = XbrlStreamReader(io.BytesIO(data), CollectingHandler()).parse()
    assert handler.facts == [StreamingFact(concept="us-gaap:Assets", context_ref="c2", value="7")]


def test_default_callbacks_ignore_contexts_and_units():
    xml = (
        '<xbrl><xbrli:context id="c1"/><xbrli:unit id="u1"/>'
        '<x:A contextRef="c1">1</x:A></xbrl>'
    )
    handler = XbrlStreamReader(xml, FactsOnlyHandler()).parse()
    assert [f.value for f in handler.facts] == ["1"]


def test_malformed_xml_raises():
    with pytest.raises(StreamXmlError):
        parse("<xbrl><unclosed></xbrl>")


def test_handler_failure_is_wrapped():
    xml = '<xbrl><x:A contextRef="c1">1</x:A></xbrl>'
    with pytest.raises(StreamHandlerError) as info:
        XbrlStreamReader(xml, FailingHandler()).parse()
    assert isinstance(info.value.cause, ValueError)
    assert "rejected" in str(info.value)