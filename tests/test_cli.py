"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from event_seo.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_json_output(self, runner, make_text):
        """Test raw JSON result."""
        result = runner.invoke(main, [
            "validate",
            "--title", make_text(55),
            "--description", make_text(155),
            "--keywords", "a,b,c,d,e",
            "--json",
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["score"] == 100
        assert data["is_valid"] is True

    def test_invalid_content_exits_nonzero(self, runner):
        """Test content with warnings exits with status 2."""
        result = runner.invoke(main, ["validate", "--title", ""])

        assert result.exit_code == 2
        assert "Title is required" in result.output

    def test_input_file(self, runner, tmp_path: Path, make_text):
        """Test content loaded from a JSON file, options taking precedence."""
        input_path = tmp_path / "seo.json"
        input_path.write_text(json.dumps({
            "title": "ignored",
            "description": make_text(155),
            "keywords": ["a", "b", "c", "d", "e"],
        }))

        result = runner.invoke(main, [
            "validate", "--input", str(input_path), "--title", make_text(55), "--json",
        ])

        assert result.exit_code == 0
        assert json.loads(result.output)["title_score"] == 100

    def test_bad_json_file(self, runner, tmp_path: Path):
        """Test malformed JSON input prints an error and exits 1."""
        input_path = tmp_path / "bad.json"
        input_path.write_text("{not json")

        result = runner.invoke(main, ["validate", "--input", str(input_path)])

        assert result.exit_code == 1
        assert "Input error" in result.output

    @pytest.mark.parametrize("payload", [
        {"title": 123},
        {"keywords": 5},
        {"description": ["not", "text"]},
    ])
    def test_wrong_field_types(self, runner, tmp_path: Path, payload):
        """Test well-formed JSON with wrongly typed fields exits 1 with a message."""
        input_path = tmp_path / "typed.json"
        input_path.write_text(json.dumps(payload))

        result = runner.invoke(main, ["validate", "--input", str(input_path)])

        assert result.exit_code == 1
        assert "Input error" in result.output
        assert not isinstance(result.exception, TypeError)


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_json_output(self, runner):
        """Test raw JSON analysis."""
        result = runner.invoke(main, ["analyze", "--title", "Art Camp", "--keywords", "art,kids", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["title_length"] == 8
        assert data["title_score"] == 30
        assert data["keyword_score"] == 50

    def test_table_output(self, runner):
        """Test table output shows the overall score."""
        result = runner.invoke(main, ["analyze", "--title", "Art Camp"])

        assert result.exit_code == 0
        assert "Overall" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_event(self, runner):
        """Test event generation as JSON."""
        result = runner.invoke(main, [
            "generate",
            "--title", "Art Camp",
            "--description", "Painting for kids.",
            "--category", "Workshops",
            "--location", "Dubai",
            "--tag", "painting",
            "--json",
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["title"] == "Art Camp | Kids Workshops in Dubai | Gema Events"
        assert data["keywords"][-1] == "painting"

    def test_generate_article_table(self, runner):
        """Test article generation with table output."""
        result = runner.invoke(main, [
            "generate", "--title", "Tips", "--description", "Games.", "--type", "article",
        ])

        assert result.exit_code == 0
        assert "Score" in result.output

    def test_rejects_unknown_type(self, runner):
        """Test content type choices are enforced."""
        result = runner.invoke(main, [
            "generate", "--title", "x", "--description", "y", "--type", "podcast",
        ])
        assert result.exit_code != 0


class TestExtractCommand:
    """Tests for the extract command."""

    def test_extract(self, runner):
        """Test one keyword per line."""
        result = runner.invoke(main, ["extract", "the quick brown fox the fox runs", "-n", "2"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["fox", "quick"]


class TestPreviewCommand:
    """Tests for the preview command."""

    def test_preview(self, runner):
        """Test previews show the display URL."""
        result = runner.invoke(main, [
            "preview", "--title", "Art Camp", "--description", "Painting.",
            "--url", "https://gema-events.com/events/1?x=1",
        ])

        assert result.exit_code == 0
        assert "gema-events.com/events/1" in result.output

    def test_base_url_from_env(self, runner):
        """Test the site root can be set through the environment."""
        result = runner.invoke(
            main,
            ["preview", "--title", "Art Camp"],
            env={"EVENT_SEO_BASE_URL": "https://staging.example.com"},
        )

        assert result.exit_code == 0
        assert "staging.example.com/" in result.output


class TestAuditCommand:
    """Tests for the audit command."""

    def test_audit_writes_report(self, runner, sample_content_csv: Path, tmp_path: Path):
        """Test audit prints a summary and writes the CSV report."""
        output = tmp_path / "report.csv"
        result = runner.invoke(main, ["audit", str(sample_content_csv), "--output", str(output)])

        assert result.exit_code == 0
        assert "have warnings" in result.output
        assert output.exists()
        assert "overall_score" in output.read_text()

    def test_audit_bad_file(self, runner, tmp_path: Path):
        """Test loading errors exit 1."""
        path = tmp_path / "bad.csv"
        path.write_text("description\nno title column\n")

        result = runner.invoke(main, ["audit", str(path)])

        assert result.exit_code == 1
        assert "Content loading error" in result.output
