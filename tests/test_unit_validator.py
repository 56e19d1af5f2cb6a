from xbrlkit.report_types import Fact
from xbrlkit.unit_validator import (
    UnitRules,
    UnitValidator,
    validate_unit_consistency,
)


def make_fact(concept, unit_ref):
    return Fact(
        concept=concept,
        context_ref="ctx-1",
        unit_ref=unit_ref,
        decimals="2",
        value="1000",
        member="",
    )


def test_monetary_with_currency():
    fact = make_fact("us-gaap:Revenue", "u-1")
    assert UnitValidator().validate_fact(fact, [("u-1", "iso4217:USD")]) is None


def test_monetary_with_wrong_unit():
    fact = make_fact("us-gaap:Revenue", "u-1")
    finding = UnitValidator().validate_fact(fact, [("u-1", "xbrli:shares")])
    assert finding is not None
    assert finding.rule_id == "SEC-UNIT-001"
    assert finding.severity == "error"
    assert finding.subject == "us-gaap:Revenue"
    assert finding.member == ""
    assert "Monetary" in finding.message
    assert "'xbrli:shares'" in finding.message


def test_shares_with_correct_unit():
    fact = make_fact("us-gaap:CommonStockSharesOutstanding", "u-1")
    assert UnitValidator().validate_fact(fact, [("u-1", "xbrli:shares")]) is None


def test_shares_with_wrong_unit():
    fact = make_fact("us-gaap:CommonStockSharesOutstanding", "u-1")
    finding = UnitValidator().validate_fact(fact, [("u-1", "iso4217:USD")])
    assert finding is not None
    assert finding.rule_id == "SEC-UNIT-001"


def test_no_unit_ref():
    fact = make_fact("us-gaap:Revenue", None)
    assert UnitValidator().validate_fact(fact, []) is None


def test_unknown_unit_id_is_skipped():
    fact = make_fact("us-gaap:Revenue", "u-9")
    assert UnitValidator().validate_fact(fact, [("u-1", "xbrli:shares")]) is None


def test_concept_without_expectation_is_skipped():
    fact = make_fact("dei:DocumentType", "u-1")
    assert UnitValidator().validate_fact(fact, [("u-1", "xbrli:shares")]) is None


def test_rules_add_explicit_expectations():
    rules = UnitRules(pure_concepts=["dei:DocumentType"])
    fact = make_fact("dei:DocumentType", "u-1")
    finding = UnitValidator(rules).validate_fact(fact, [("u-1", "xbrli:shares")])
    assert finding is not None
    assert "Pure" in finding.message


def test_validate_facts_collects_only_failures():
    facts = [
        make_fact("us-gaap:Revenue", "usd"),
        make_fact("us-gaap:Assets", "shares"),
        make_fact("us-gaap:CommonStockSharesOutstanding", "shares"),
    ]
    units = [("usd", "iso4217:USD"), ("shares", "xbrli:shares")]
    findings = UnitValidator().validate_facts(facts, units)
    assert [f.subject for f in findings] == ["us-gaap:Assets"]


def test_validate_unit_consistency_with_and_without_rules():
    facts = [make_fact("acme:Widgets", "u-1")]
    units = [("u-1", "iso4217:USD")]
    assert validate_unit_consistency(facts, units) == []
    rules = UnitRules(share_concepts=["acme:Widgets"])
    findings = validate_unit_consistency(facts, units, rules)
    assert len(findings) == 1
    assert findings[0].subject == "acme:Widgets"