"""Tests for the wink-render command line."""

import logging

import pytest
from PIL import Image

from render_engine.main import main
from render_engine.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """main() installs console handlers; drop them after each test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def files(tmp_path):
    html = tmp_path / "page.html"
    html.write_text("<div><p></p><p></p></div>")
    css = tmp_path / "style.css"
    css.write_text("p { height: 10px; background-color: #0000ff; }")
    config = tmp_path / "config.json"
    return tmp_path, str(html), str(css), str(config)


class TestMain:
    def test_dump(self, files, capsys):
        _, html, css, config = files

        status = main([html, "--css", css, "--fragment", "--dump", "--config", config])

        assert status == 0
        out = capsys.readouterr().out
        assert "<div> block x=0 y=0 w=640 h=20" in out
        assert "  <p> block x=0 y=10 w=640 h=10" in out

    def test_output_png(self, files):
        tmp_path, html, css, config = files
        output = str(tmp_path / "out.png")

        status = main([html, "--css", css, "--fragment", "--width", "50", "--height", "40",
                       "--output", output, "--config", config])

        assert status == 0
        with Image.open(output) as image:
            assert image.size == (50, 40)
            rgb = image.convert("RGB")
            assert rgb.getpixel((0, 0)) == (0, 0, 255)
            assert rgb.getpixel((0, 30)) == (255, 255, 255)

    def test_missing_html(self, files):
        tmp_path, _, _, config = files
        assert main([str(tmp_path / "missing.html"), "--config", config]) == 1

    def test_parse_error(self, files):
        tmp_path, html, _, config = files
        bad = tmp_path / "bad.css"
        bad.write_text("div p { color: red; }")

        assert main([html, "--css", str(bad), "--config", config]) == 1

    def test_strict_ids_flag(self, files, capsys):
        tmp_path, _, _, config = files
        html = tmp_path / "ids.html"
        html.write_text('<p class="foo"></p>')
        css = tmp_path / "ids.css"
        css.write_text(".foo { height: 1px; } p, #bar { height: 2px; }")

        main([str(html), "--css", str(css), "--fragment", "--dump", "--config", config])
        assert "h=2" in capsys.readouterr().out

        main([str(html), "--css", str(css), "--fragment", "--dump", "--strict-ids", "--config", config])
        assert "h=1" in capsys.readouterr().out
