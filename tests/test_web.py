"""Tests for the Flask front end."""
import io
import unittest
from unittest.mock import patch

from bibshelf import web
from bibshelf.utils.error_handling import FetchError

SIMPLE_BIBTEX = """
@article{a2020, title = {Alpha Paper}, author = {Doe, Jane}, journal = {J. Tests}, year = {2020}}
@inproceedings{b2021, title = {Beta Paper}, author = {Smith, John}, booktitle = {Conf}, year = {2021}}
"""


class WebAppTest(unittest.TestCase):
    def setUp(self):
        web.app.config["TESTING"] = True
        web.limiter.enabled = False
        self.client = web.app.test_client()

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, b"ok")

    def test_index_without_source_shows_form(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b'<form class="bibtex-form"', resp.data)

    @patch("bibshelf.sources.fetch_document", return_value=SIMPLE_BIBTEX)
    def test_index_from_url_grouped_by_type(self, mock_fetch):
        resp = self.client.get("/?bib=https://example.org/refs.bib&group=type")
        self.assertEqual(resp.status_code, 200)
        html = resp.get_data(as_text=True)
        self.assertIn("Conference Papers", html)
        self.assertLess(html.index("Conference Papers"), html.index("Journal Articles"))
        mock_fetch.assert_called_once()

    @patch("bibshelf.sources.fetch_document", return_value=SIMPLE_BIBTEX)
    def test_index_search(self, mock_fetch):
        html = self.client.get("/?bib=https://example.org/refs.bib&q=beta").get_data(as_text=True)
        self.assertIn("Beta Paper", html)
        self.assertNotIn("Alpha Paper", html)
        self.assertIn("Showing 1 of 2", html)

    def test_upload(self):
        data = {"file": (io.BytesIO(SIMPLE_BIBTEX.encode("utf-8")), "refs.bib")}
        resp = self.client.post("/", data=data, content_type="multipart/form-data")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b"Alpha Paper", resp.data)

    def test_upload_wrong_extension(self):
        data = {"file": (io.BytesIO(b"hello"), "notes.txt")}
        resp = self.client.post("/", data=data, content_type="multipart/form-data")
        self.assertIn(b"Please upload a valid .bib or .csv file", resp.data)

    def test_invalid_url_message(self):
        resp = self.client.get("/?bib=not-a-url")
        self.assertIn(b"Please enter a valid URL", resp.data)

    @patch("bibshelf.sources.fetch_document", side_effect=FetchError("Failed to fetch from all sources"))
    def test_fetch_failure_message(self, mock_fetch):
        resp = self.client.get("/?bib=https://example.org/refs.bib")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b"Failed to load file: Failed to fetch from all sources", resp.data)

    @patch("bibshelf.sources.fetch_document", return_value="nothing here")
    def test_no_publications_message(self, mock_fetch):
        resp = self.client.get("/?bib=https://example.org/refs.bib")
        self.assertIn(b"No publications found in the BIB file", resp.data)

    @patch("bibshelf.sources.fetch_document", return_value=SIMPLE_BIBTEX)
    def test_embed_fragment(self, mock_fetch):
        resp = self.client.get("/embed?bib=https://example.org/refs.bib")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "*")
        html = resp.get_data(as_text=True)
        self.assertNotIn("<html", html)
        self.assertLess(html.index("2021"), html.index("2020"))

    def test_embed_requires_bib(self):
        resp = self.client.get("/embed")
        self.assertEqual(resp.status_code, 400)
        self.assertIn(b"No bib URL provided", resp.data)

    @patch("bibshelf.sources.fetch_document", return_value=SIMPLE_BIBTEX)
    def test_export_csv(self, mock_fetch):
        resp = self.client.get("/export/csv?bib=https://example.org/refs.bib")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("attachment; filename=publications.csv", resp.headers["Content-disposition"])
        self.assertTrue(resp.get_data(as_text=True).startswith("Title,Authors,Year"))

    @patch("bibshelf.sources.fetch_document", return_value=SIMPLE_BIBTEX)
    def test_export_docx(self, mock_fetch):
        resp = self.client.get("/export/docx?bib=https://example.org/refs.bib")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data.startswith(b"PK"))

    def test_export_unknown_format(self):
        resp = self.client.get("/export/ris?bib=https://example.org/refs.bib")
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
