# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Tests for the command line page builder."""

import json

from htmlgen.__main__ import main


def wrap(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


class TestMain:
    def test_empty_page(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == wrap() + "\n"

    def test_body_flags_keep_their_order(self, capsys):
        status = main(
            [
                "--title", "Notes",
                "--paragraph", "first",
                "--header", "2", "Second",
                "--link", "/x", "X & Y",
                "--image", "a.png", "A",
                "--raw", "<hr>",
            ],
        )

        assert status == 0
        assert capsys.readouterr().out == wrap(
            "<title>Notes</title>",
            '<p>first</p><h2>Second</h2><a href="/x">X &amp; Y</a>'
            '<img src="a.png" alt="A"><hr>',
        ) + "\n"

    def test_consecutive_items_form_one_list(self, capsys):
        assert main(["--item", "a", "--item", "b", "--paragraph", "p", "--item", "c"]) == 0
        assert capsys.readouterr().out == wrap(
            body="<ul><li>a</li><li>b</li></ul><p>p</p><ul><li>c</li></ul>",
        ) + "\n"

    def test_stylesheets(self, capsys):
        assert main(["--stylesheet", "/a.css", "--stylesheet", "/b.css"]) == 0
        assert capsys.readouterr().out == wrap(
            '<link rel="stylesheet" href="/a.css"><link rel="stylesheet" href="/b.css">',
        ) + "\n"

    def test_environment_defaults(self, capsys, monkeypatch):
        monkeypatch.setenv("HTMLGEN_TITLE", "From env")
        monkeypatch.setenv("HTMLGEN_STYLESHEET", "/env.css")

        assert main(["--stylesheet", "/cli.css"]) == 0
        assert capsys.readouterr().out == wrap(
            "<title>From env</title>"
            '<link rel="stylesheet" href="/env.css">'
            '<link rel="stylesheet" href="/cli.css">',
        ) + "\n"

    def test_output_file(self, capsys, tmp_path):
        target = tmp_path / "page.html"

        assert main(["--output", str(target), "--paragraph", "saved"]) == 0

        assert target.read_text(encoding="utf-8") == wrap(body="<p>saved</p>") + "\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err.splitlines()[-1])["message"] == f"Wrote page to {target}"

    def test_file_and_stdout_output_match(self, capsys, tmp_path):
        target = tmp_path / "page.html"

        assert main(["--title", "Same", "--paragraph", "text"]) == 0
        printed = capsys.readouterr().out
        assert main(["--title", "Same", "--paragraph", "text", "-o", str(target)]) == 0

        assert target.read_text(encoding="utf-8") == printed

    def test_invalid_header_level(self, capsys):
        assert main(["--header", "7", "Too deep"]) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.splitlines()[-1])
        assert record["message"] == "Invalid page content"
        assert record["exc_info"]["type"] == "InvalidInputError"

    def test_non_numeric_header_level(self, capsys):
        assert main(["--header", "two", "Text"]) == 2

        record = json.loads(capsys.readouterr().err.splitlines()[-1])
        assert record["exc_info"]["type"] == "InvalidInputError"
        assert record["exc_info"]["cause"]["type"] == "ValueError"
