"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from gql_fragments.cli import main


TWEET = "fragment simpleTweet on Tweet @export { id body }\n"
TIMELINE = """
query Timeline {
  timeline { ...simpleTweet @import(from: "fragments.tweet") }
}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_root(write_tree):
    return write_tree({
        "fragments/tweet.graphql": TWEET,
        "queries/timeline.graphql": TIMELINE,
    })


class TestGenerateCommand:
    """Tests for `gql-fragments generate`."""

    def test_writes_operation_files_only(self, runner, source_root, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(main, ["generate", "-r", str(source_root), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Wrote 1 document(s)" in result.output
        assert (output / "queries" / "timeline.graphql").exists()
        assert not (output / "fragments" / "tweet.graphql").exists()

    def test_output_contains_imported_fragment(self, runner, source_root, tmp_path):
        output = tmp_path / "out"
        runner.invoke(main, ["generate", "-r", str(source_root), "-o", str(output)])

        content = (output / "queries" / "timeline.graphql").read_text()
        assert "query Timeline" in content
        assert "fragment simpleTweet on Tweet" in content

    def test_strip_directives_and_header(self, runner, source_root, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(main, [
            "generate",
            "-r", str(source_root),
            "-o", str(output),
            "--strip-directives",
            "--header", "Generated - do not edit",
        ])

        assert result.exit_code == 0, result.output
        content = (output / "queries" / "timeline.graphql").read_text()
        assert content.startswith("# Generated - do not edit\n")
        assert "@import" not in content
        assert "@export" not in content

    def test_verbose_lists_written_files(self, runner, source_root, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(main, ["generate", "-r", str(source_root), "-o", str(output), "-v"])

        assert result.exit_code == 0, result.output
        assert "timeline.graphql" in result.output

    def test_resolution_error_exits_with_message(self, runner, write_tree, tmp_path):
        root = write_tree({
            "a.graphql": 'fragment aFragment on T @export { ...bFragment @import(from: "b") }',
            "b.graphql": 'fragment bFragment on T @export { ...aFragment @import(from: "a") }',
        })
        result = runner.invoke(main, ["generate", "-r", str(root), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Cycle in fragment resolution" in result.output
        assert not (tmp_path / "out").exists()

    def test_empty_extension_is_usage_error(self, runner, source_root, tmp_path):
        result = runner.invoke(main, [
            "generate", "-r", str(source_root), "-o", str(tmp_path / "out"), "-e", ".",
        ])
        assert result.exit_code == 2


class TestCheckCommand:
    """Tests for `gql-fragments check`."""

    def test_ok(self, runner, source_root):
        result = runner.invoke(main, ["check", "-r", str(source_root)])

        assert result.exit_code == 0, result.output
        assert "OK: 1 document(s) resolve" in result.output

    def test_custom_extension(self, runner, write_tree):
        root = write_tree({"q.gql": "query Q { id }", "ignored.graphql": "query I { id }"})
        result = runner.invoke(main, ["check", "-r", str(root), "-e", "gql"])

        assert result.exit_code == 0, result.output
        assert "OK: 1 document(s) resolve" in result.output

    def test_missing_export(self, runner, write_tree):
        root = write_tree({
            "lib.graphql": "fragment hidden on T { id }",
            "q.graphql": 'query Q { t { ...hidden @import(from: "lib") } }',
        })
        result = runner.invoke(main, ["check", "-r", str(root)])

        assert result.exit_code == 1
        assert "hidden" in result.output

    def test_parse_error(self, runner, write_tree):
        root = write_tree({"bad.graphql": "query {"})
        result = runner.invoke(main, ["check", "-r", str(root)])

        assert result.exit_code == 1
        assert "bad.graphql" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        (tmp_path / "binary.graphql").write_bytes(b"\xff\xfe query Q { id }")
        result = runner.invoke(main, ["check", "-r", str(tmp_path)])

        assert result.exit_code == 1
        assert "binary.graphql" in result.output
