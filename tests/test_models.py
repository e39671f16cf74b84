"""Tests for coordinates, artifacts and cycles."""

from pom_analyzer.models import Coordinate, Cycle

from helpers import build_registry, coord


def test_coordinate_equality_and_hash():
    a = Coordinate("org.acme", "core")
    b = Coordinate("org.acme", "core")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Coordinate("org.acme", "api")
    assert a != Coordinate("org.other", "core")


def test_coordinate_string_form():
    assert str(Coordinate("org.acme", "core")) == "org.acme:core"


def test_coordinate_helpers():
    c = Coordinate("org.acme.tools", "core-api")
    assert c.group_contains("acme")
    assert c.name_contains("api")
    assert c.matches("org.acme.tools", "core-api")
    assert not c.matches("org.acme", "core-api")


class TestArtifact:
    def test_edge_maps_are_inverse(self):
        registry = build_registry("a->b", "a->c", "c->b")
        a = registry.get(coord("a"))
        b = registry.get(coord("b"))
        assert list(a.depends_on) == [coord("b"), coord("c")]
        assert set(b.required_by) == {coord("a"), coord("c")}
        assert b.depends_on == {}
        assert a.required_by == {}

    def test_reaches_is_transitive(self):
        registry = build_registry("a->b", "b->c")
        a = registry.get(coord("a"))
        assert a.reaches("com.example", "b")
        assert a.reaches("com.example", "c")
        assert a.reaches("com.example", "a")
        assert not registry.get(coord("c")).reaches("com.example", "a")

    def test_reaches_terminates_on_cycle(self):
        registry = build_registry("a->b", "b->a")
        a = registry.get(coord("a"))
        assert a.reaches("com.example", "a")
        assert not a.reaches("com.example", "missing")

    def test_removed_artifact_has_no_edges(self):
        registry = build_registry("a->b")
        b = registry.get(coord("b"))
        registry.remove({coord("b")})
        assert b.required_by == {}
        assert b.depends_on == {}


class TestCycle:
    def test_key_ignores_order(self):
        registry = build_registry("a->b", "b->c", "c->a")
        a, b, c = (registry.get(coord(n)) for n in "abc")
        assert Cycle([a, b, c]).key == Cycle([b, c, a]).key
        assert len(Cycle([a, b, c])) == 3

    def test_describe_closes_loop(self):
        registry = build_registry("a->b", "b->a")
        a, b = registry.get(coord("a")), registry.get(coord("b"))
        assert Cycle([a, b]).describe() == "com.example:a -> com.example:b -> com.example:a"

    def test_contains(self):
        registry = build_registry("a->b", "b->a", "b->c")
        a, b, c = (registry.get(coord(n)) for n in "abc")
        cycle = Cycle([a, b])
        assert cycle.contains(a, b)
        assert cycle.contains(b, a)
        assert not cycle.contains(b, c)


def test_leaf_reaches_itself():
    registry = build_registry("a->junit")
    junit = registry.get(coord("junit"))
    assert junit.reaches("com.example", "junit")
    assert not junit.reaches("com.example", "a")


def test_cycle_key_is_computed_once():
    registry = build_registry("a->b", "b->a")
    cycle = Cycle([registry.get(coord("a")), registry.get(coord("b"))])
    assert cycle.key is cycle.key
