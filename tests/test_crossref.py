"""Tests for crossref inheritance."""
from bibshelf.crossref import resolve_crossrefs
from bibshelf.models import RawEntry


def _entry(key, fields, order=0, entry_type="inproceedings"):
    return RawEntry(type=entry_type, key=key, fields=fields, source_order=order, raw=f"@{entry_type}{{{key},}}")


class TestResolveCrossrefs:
    def test_child_inherits_and_parent_dropped(self):
        child = _entry("child", {"crossref": "parent", "title": "T"})
        parent = _entry("parent", {"booktitle": "V", "year": "2020", "title": "Proceedings"}, 1, "proceedings")
        result = resolve_crossrefs([child, parent])

        assert [e.key for e in result] == ["child"]
        assert result[0].fields["booktitle"] == "V"
        assert result[0].fields["year"] == "2020"
        # child wins on collision
        assert result[0].fields["title"] == "T"

    def test_raw_includes_parent_text(self):
        child = _entry("child", {"crossref": "parent"})
        parent = _entry("parent", {"booktitle": "V"}, 1)
        result = resolve_crossrefs([child, parent])
        assert result[0].raw == "@inproceedings{child,}\n\n@inproceedings{parent,}"

    def test_unreferenced_parent_survives(self):
        a = _entry("a", {"title": "A"})
        b = _entry("b", {"title": "B"}, 1)
        assert [e.key for e in resolve_crossrefs([a, b])] == ["a", "b"]

    def test_unknown_crossref_left_unmodified(self):
        child = _entry("child", {"crossref": "missing", "title": "T"})
        result = resolve_crossrefs([child])
        assert result[0] is child
        assert result[0].fields == {"crossref": "missing", "title": "T"}

    def test_shared_parent_dropped_once_for_all_children(self):
        parent = _entry("proc", {"booktitle": "V"}, 0, "proceedings")
        c1 = _entry("c1", {"crossref": "proc", "title": "One"}, 1)
        c2 = _entry("c2", {"crossref": "proc", "title": "Two"}, 2)
        result = resolve_crossrefs([parent, c1, c2])
        assert [e.key for e in result] == ["c1", "c2"]
        assert all(e.fields["booktitle"] == "V" for e in result)

    def test_input_not_mutated(self):
        child = _entry("child", {"crossref": "parent", "title": "T"})
        parent = _entry("parent", {"booktitle": "V"}, 1)
        resolve_crossrefs([child, parent])
        assert child.fields == {"crossref": "parent", "title": "T"}
