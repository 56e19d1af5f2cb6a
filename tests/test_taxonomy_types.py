from xbrlkit.taxonomy_types import DtsDescriptor, NamespaceMapping, load_entry_points


def test_load_entry_points_keeps_order_and_has_no_namespaces():
    points = ["b.xsd", "a.xsd", "c.xsd"]
    dts = load_entry_points(points)
    assert dts == DtsDescriptor(entry_points=["b.xsd", "a.xsd", "c.xsd"], namespaces=[])
    assert dts.namespaces == []


def test_load_entry_points_copies_input():
    points = ["a.xsd"]
    dts = load_entry_points(points)
    points.append("b.xsd")
    assert dts == DtsDescriptor(entry_points=["a.xsd"])


def test_load_entry_points_accepts_generators():
    dts = load_entry_points(name for name in ("x.xsd", "y.xsd"))
    assert dts == DtsDescriptor(entry_points=["x.xsd", "y.xsd"])


def test_empty_descriptor_equals_loaded_empty():
    assert load_entry_points([]) == DtsDescriptor()


def test_descriptor_defaults_not_shared():
    first = DtsDescriptor()
    first.namespaces.append(NamespaceMapping(prefix="p", uri="u"))
    assert DtsDescriptor().namespaces == []
    assert first.namespaces[0] == NamespaceMapping("p", "u")