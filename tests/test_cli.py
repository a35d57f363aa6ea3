"""Tests for the wikitopics command-line entry point."""

import json
from unittest.mock import patch

import pytest

from helpers import heading_section, make_api, parsoid_doc
from wikitopics.cli import main
from wikitopics.config import Settings

_PAGES = {
    "Albert Einstein": parsoid_doc(heading_section(1, "h2", "Life")),
    "Niels Bohr": parsoid_doc(heading_section(1, "h2", "Atom")),
}


@pytest.fixture
def settings(tmp_path):
    return Settings(output_dir=str(tmp_path), collections={"science": ["Albert Einstein", "Niels Bohr"]})


def _main(settings, api, argv):
    with (
        patch("wikitopics.cli.get_settings", return_value=settings),
        patch("wikitopics.cli.configure_logging"),
        patch("wikitopics.cli.build_api_client", return_value=api) as build,
    ):
        code = main(argv)
    return code, build


class TestCli:
    def test_default_collection(self, settings, tmp_path):
        api = make_api(_PAGES, lambda text: [{"conceptId": "Q1", "salience": 1.0}])
        code, _ = _main(settings, api, [])

        assert code == 0
        final = json.loads((tmp_path / "sectionswithtopics-science.json").read_text(encoding="utf-8"))
        assert set(final) == {"Albert Einstein", "Niels Bohr"}

    def test_explicit_pages_and_output_dir(self, settings, tmp_path):
        out = tmp_path / "elsewhere"
        api = make_api(_PAGES)
        code, _ = _main(settings, api, ["-c", "physics", "--pages", "Niels Bohr", "--output-dir", str(out)])

        assert code == 0
        assert (out / "wikisections-physics.json").exists()
        assert api.pages.requested == ["Niels Bohr"]

    def test_delay_override_reaches_client(self, settings):
        code, build = _main(settings, make_api(_PAGES), ["--delay-ms", "0"])

        assert code == 0
        assert build.call_args.args[0].request_delay_ms == 0

    def test_aborted_run_exits_1(self, settings, tmp_path):
        api = make_api({"Albert Einstein": RuntimeError("x"), "Niels Bohr": RuntimeError("y")})
        code, _ = _main(settings, api, [])

        assert code == 1
        assert not (tmp_path / "wikisections-science.json").exists()

    def test_unknown_collection_is_usage_error(self, settings):
        with pytest.raises(SystemExit) as exc_info:
            _main(settings, make_api({}), ["--collection", "history"])
        assert exc_info.value.code == 2
