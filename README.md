# xbrlkit

Tools for reading and checking XBRL instance documents, and for holding dimension taxonomies in memory.

## What it does

- **Report model**: `xbrlkit.report_types` has the dataclasses `Fact`, `ValidationFinding` and `CanonicalReport`.
- **Contexts**: `xbrlkit.contexts.parse_contexts` reads every context in an XBRL instance into a `ContextSet`. Each `Context` has an entity identifier and a period, which is an `InstantPeriod`, a `DurationPeriod` or a `ForeverPeriod`. It also has the explicit and typed dimension members of its segment and scenario. `ContextSet.get` looks up a context by id and ignores case and surrounding space. Malformed contexts raise a subclass of `ContextError`.
- **Streaming**: `xbrlkit.stream.XbrlStreamReader` reads an instance as a stream of events. It does not build a tree. Each fact, context and unit goes to a `FactHandler` subclass as the reader finds it. Errors are raised as `StreamError` subclasses.
- **Dimension taxonomies**: `xbrlkit.dimensions.DimensionTaxonomy` holds dimensions, domains and hypercubes, and the hypercubes linked to each concept. `required_dimensions_for_concept` lists the dimensions a concept must carry. `validate_member` raises `UnknownDimensionError`, `NoDomainError` or `InvalidMemberError` when a dimension–member pair is not valid.
- **Taxonomy sets**: `xbrlkit.taxonomy_types` has `DtsDescriptor`, `NamespaceMapping` and `load_entry_points`. `xbrlkit.dts` has these helpers:
  - `build_dts` builds a taxonomy set.
  - `mixed_taxonomy_years` detects entry points from more than one taxonomy year.
  - `nonstandard_entry_points` lists entry points outside a set of standard locations.
- **Unit checks**: `xbrlkit.unit_validator.validate_unit_consistency` flags facts whose unit does not suit their concept, for example a revenue figure reported in shares. Such a finding has rule id `SEC-UNIT-001`. `xbrlkit.unit_patterns.ConceptUnitPatterns` maps concept names to an `ExpectedUnitType`. You can give it explicit entries and extra regular expressions. `UnitRules` assigns concepts to unit families explicitly.
- **Validation helpers**: `xbrlkit.validation` has three functions:
  - `validate_contexts` reports contexts without an entity identifier, and contexts that carry dimensions.
  - `validate_context_completeness_streaming` reports facts that refer to undefined contexts.
  - `should_use_streaming` tells you whether a document is over the streaming threshold, which is 100 MB by default.
- **Normalisation**: `xbrlkit.normalize` has `normalize_dimension` and `normalize_unit`.

## Installation

```
pip install xbrlkit
```

## Examples

Parse contexts:

```python
from xbrlkit.contexts import parse_contexts, get_dimensional_members

contexts = parse_contexts(xml_text)
ctx = contexts.get("CTX-2024")          # None if there is no such context
if ctx is not None:
    for member in get_dimensional_members(ctx):
        print(member.dimension, member.member)
```

Stream facts from a large file:

```python
import io
from xbrlkit.stream import FactHandler, XbrlStreamReader

class Collect(FactHandler):
    def __init__(self):
        self.facts = []

    def on_fact(self, fact):
        self.facts.append(fact)

handler = XbrlStreamReader(io.StringIO(xml_text), Collect()).parse()
print(len(handler.facts))
```

Check units:

```python
from xbrlkit.report_types import Fact
from xbrlkit.unit_validator import validate_unit_consistency

facts = [Fact(concept="us-gaap:Revenue", context_ref="ctx-1", unit_ref="u-1", value="1000")]
findings = validate_unit_consistency(facts, [("u-1", "xbrli:shares")], None)
for finding in findings:
    print(finding.rule_id, finding.message)
```

Build and query a dimension taxonomy:

```python
from xbrlkit.dimensions import DimensionTaxonomy, Hypercube

taxonomy = DimensionTaxonomy()
cube = Hypercube("us-gaap:StatementTable")
cube.add_dimension("us-gaap:StatementScenarioAxis", True)
taxonomy.add_hypercube(cube)
taxonomy.associate_concept_hypercube("us-gaap:Revenues", "us-gaap:StatementTable", False)
print(taxonomy.required_dimensions_for_concept("us-gaap:Revenues"))
```

## What it does not do

The package does not read taxonomy schemas, definition linkbases or taxonomy packages from disk or over the network. You have to build a `DimensionTaxonomy` in code. `xbrlkit.loader_errors` defines error types for taxonomy loading, but no loader in the package raises them. The package has no command-line program.

## Running the tests

```
pip install "xbrlkit[test]"
pytest
```