"""Tests for the eventmail command-line interface."""

import json

import pytest
from click.testing import CliRunner

from src.emails.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps({
        "name": "Conf",
        "slug": "conf",
        "date": "1 May",
        "program": "A(10:00),B(14:00),C(16:00)",
        "speakers": "Ann, Bob",
        "html_template": "<h1>{{headline}}</h1><!--IF:pain_point--><p>{{pain_point}}</p><!--ENDIF-->",
    }))
    return path


class TestTypesCommand:
    def test_lists_every_content_type(self, runner):
        result = runner.invoke(cli, ["types"])

        assert result.exit_code == 0
        for value in ("announce", "sale", "pain_sale", "reminder", "digest"):
            assert value in result.output


class TestGenerateCommand:
    def test_json_output(self, runner, event_file):
        result = runner.invoke(
            cli,
            ["generate", str(event_file), "--type", "announce", "--json",
             "--base-url", "https://events.example.org"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["subject"] == "Conf — 1 May"
        assert data["cta_url"] == "https://events.example.org/events/conf"
        assert data["utm_params"]["utm_content"] == "announce"
        assert data["errors"] == []

    def test_base_url_from_environment(self, runner, event_file):
        result = runner.invoke(
            cli,
            ["generate", str(event_file), "--json"],
            env={"BASE_URL": "https://env.example.org"},
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["cta_url"] == "https://env.example.org/events/conf"

    def test_table_output(self, runner, event_file):
        result = runner.invoke(cli, ["generate", str(event_file), "--type", "reminder"])

        assert result.exit_code == 0
        assert "Tomorrow: Conf!" in result.output

    def test_strict_flags_short_preheader(self, runner, event_file):
        result = runner.invoke(
            cli, ["generate", str(event_file), "--type", "sale", "--strict", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["errors"] == [
            {"slot": "preheader", "reason": "below_min_length"}
        ]

    def test_writes_html_with_event_template(self, runner, event_file, tmp_path):
        html_path = tmp_path / "out.html"
        result = runner.invoke(
            cli,
            ["generate", str(event_file), "--type", "pain_sale", "--html", str(html_path)],
        )

        assert result.exit_code == 0
        html = html_path.read_text()
        assert html.startswith("<h1>Sound familiar?</h1><p>")
        assert "<!--IF" not in html

    def test_missing_name_fails(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"slug": "conf"}))

        result = runner.invoke(cli, ["generate", str(path)])

        assert result.exit_code == 1
        assert "name" in result.output

    def test_invalid_json_fails(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        result = runner.invoke(cli, ["generate", str(path)])
        assert result.exit_code == 1

    def test_unknown_type_rejected(self, runner, event_file):
        result = runner.invoke(cli, ["generate", str(event_file), "--type", "newsletter"])
        assert result.exit_code == 2


class TestRenderCommand:
    @pytest.fixture
    def output_file(self, runner, event_file, tmp_path):
        result = runner.invoke(cli, ["generate", str(event_file), "--type", "digest", "--json"])
        path = tmp_path / "output.json"
        path.write_text(result.output)
        return path

    def test_render_to_stdout(self, runner, output_file, tmp_path):
        template = tmp_path / "t.html"
        template.write_text("<p>{{headline}}</p><!--IF:pain_point-->{{pain_point}}<!--ENDIF-->")

        result = runner.invoke(cli, ["render", str(template), str(output_file)])

        assert result.exit_code == 0
        assert result.output.strip() == "<p>Highlights from Conf</p>"

    def test_render_flattened_utm_to_file(self, runner, output_file, tmp_path):
        template = tmp_path / "t.html"
        template.write_text("{{utm_campaign}}/{{utm_content}}")
        out = tmp_path / "rendered.html"

        result = runner.invoke(
            cli, ["render", str(template), str(output_file), "--flatten-utm", "--out", str(out)]
        )

        assert result.exit_code == 0
        assert out.read_text() == "conf/digest"

    def test_render_syntax_error_fails(self, runner, output_file, tmp_path):
        template = tmp_path / "t.html"
        template.write_text("<!--IF:intro-->never closed")

        result = runner.invoke(cli, ["render", str(template), str(output_file)])

        assert result.exit_code == 1
        assert "without matching" in result.output

    def test_partial_utm_params_filled_with_defaults(self, runner, tmp_path):
        template = tmp_path / "t.html"
        template.write_text("{{utm_source}}/{{utm_medium}}/{{utm_campaign}}")
        output = tmp_path / "o.json"
        output.write_text(json.dumps({"headline": "Hi", "utm_params": {"utm_campaign": "conf"}}))

        result = runner.invoke(cli, ["render", str(template), str(output), "--flatten-utm"])

        assert result.exit_code == 0
        assert result.output.strip() == "email/newsletter/conf"

    @pytest.mark.parametrize(
        "data",
        [
            {"utm_params": {"utm_source": "email", "utm_term": "x"}},
            {"errors": [{"slot": "program"}]},
            {"errors": ["program"]},
            {"utm_params": "email"},
        ],
    )
    def test_malformed_output_fails(self, runner, tmp_path, data):
        template = tmp_path / "t.html"
        template.write_text("{{headline}}")
        output = tmp_path / "o.json"
        output.write_text(json.dumps(data))

        result = runner.invoke(cli, ["render", str(template), str(output)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
