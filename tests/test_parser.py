"""End-to-end tests for parse_bibtex."""
import pytest

from bibshelf.parser import parse_bibtex


class TestParseSampleDocument:
    @pytest.fixture(autouse=True)
    def _parse(self, sample_bibtex):
        self.document = sample_bibtex
        self.pubs = parse_bibtex(sample_bibtex)
        self.by_key = {p.key: p for p in self.pubs}

    def test_document_order_and_drops(self):
        assert [p.key for p in self.pubs] == [
            "smith2021fast", "doe2020journal", "roe2021book", "arxiv2022", "undated",
        ]

    def test_conference_entry(self):
        pub = self.by_key["smith2021fast"]
        assert pub.type == "conference"
        assert pub.title == "Fast BibTeX Parsing"
        assert pub.authors == "John Smith, Jane Doe"
        assert pub.venue == "Intl. Conf. on SW Eng."
        assert pub.year == 2021
        assert pub.awards == ("Best Paper Award", "Distinguished Artifact")
        assert pub.raw.startswith("@inproceedings{smith2021fast,")
        assert pub.raw.endswith("}")

    def test_journal_entry(self):
        pub = self.by_key["doe2020journal"]
        assert pub.type == "journal"
        assert pub.title == "A Study of H<sub>2</sub>O"
        assert pub.url == "https://example.org/papers/study.pdf"
        assert pub.volume == "12"
        assert pub.number == "3"

    def test_book_and_preprint(self):
        assert self.by_key["roe2021book"].title == "The <em>Complete</em> Guide"
        assert self.by_key["arxiv2022"].type == "preprint"

    def test_missing_year_is_zero(self):
        assert self.by_key["undated"].year == 0

    def test_deterministic(self):
        assert parse_bibtex(self.document) == self.pubs


class TestParseProperties:
    def test_crossref_merge(self):
        doc = (
            "@inproceedings{child, crossref={parent}, title={T}}\n"
            "@proceedings{parent, booktitle={V}, year={2020}}"
        )
        pubs = parse_bibtex(doc)
        assert len(pubs) == 1
        assert pubs[0].key == "child"
        assert pubs[0].venue == "V"
        assert pubs[0].year == 2020

    def test_raw_of_merged_entry_reparses_to_same_publication(self):
        doc = (
            "@inproceedings{child, crossref={parent}, title={T}, author={Doe, J.}}\n"
            "@proceedings{parent, booktitle={V}, year={2020}}"
        )
        pub = parse_bibtex(doc)[0]
        assert parse_bibtex(pub.raw) == (pub,)

    def test_string_macro_expansion(self):
        doc = "@string{icse = {Intl. Conf. on SW Eng.}}\n@inproceedings{k, title={X}, booktitle = icse}"
        assert parse_bibtex(doc)[0].venue == "Intl. Conf. on SW Eng."

    def test_misc_without_eprint_dropped(self):
        with_misc = parse_bibtex("@article{a, title={Kept}}\n@misc{k, title={X}, author={Y}}")
        without_misc = parse_bibtex("@article{a, title={Kept}}")
        assert len(with_misc) == len(without_misc)
        assert [p.key for p in with_misc] == ["a"]

    def test_untitled_guard(self):
        doc = "@article{none, author={A}}\n@article{placeholder, title = {Untitled}}\n@article{ok, title={Fine}}"
        assert [p.key for p in parse_bibtex(doc)] == ["ok"]

    def test_url_precedence(self):
        doc = "@article{k, title={T}, url = {http://a.com}, note = {see http://a.com/paper.pdf}}"
        assert parse_bibtex(doc)[0].url == "http://a.com/paper.pdf"

    def test_garbage_yields_nothing(self):
        assert parse_bibtex("this is not bibtex {at all") == ()
        assert parse_bibtex("") == ()
