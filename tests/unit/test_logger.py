"""Unit tests for session logger setup."""

import sys

import pytest
from loguru import logger

import resumekit
from resumekit.contexts.rendering.logger import setup_rendering_logger
from resumekit.contexts.templating.logger import setup_templating_logger
from resumekit.utils.logger import provenance, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def read_log(log_file):
    # Removing sinks closes the file so everything is on disk
    logger.remove()
    return log_file.read_text(encoding="utf-8")


class TestSetupLogger:
    @pytest.mark.unit
    def test_writes_context_log_with_provenance(self, tmp_path, restore_logger):
        log_file = setup_logger("render", tmp_path / "session", extra_provenance={"Template": "modern"})

        assert log_file == tmp_path / "session" / "render.log"
        text = read_log(log_file)
        assert "Context: render" in text
        assert f"resumekit: {resumekit.__version__}" in text
        assert "Template: modern" in text

    @pytest.mark.unit
    def test_file_captures_debug_below_console_level(self, tmp_path, restore_logger, capsys):
        log_file = setup_logger("preview", tmp_path, console_level="WARNING")
        logger.debug("quiet detail")
        logger.warning("loud problem")

        text = read_log(log_file)
        assert "quiet detail" in text
        assert "loud problem" in text
        out = capsys.readouterr().out
        assert "quiet detail" not in out
        assert "loud problem" in out

    @pytest.mark.unit
    def test_context_wrappers(self, tmp_path, restore_logger):
        render_log = setup_rendering_logger(tmp_path / "render")
        assert "Serializer: WeasyPrint" in read_log(render_log)

        template_log = setup_templating_logger(tmp_path / "template", phase="catalog")
        assert "Phase: catalog" in read_log(template_log)


@pytest.mark.unit
def test_provenance_extras_follow_standard_lines():
    lines = provenance("template", {"Phase": "layout"})
    assert list(lines)[:2] == ["Context", "resumekit"]
    assert list(lines)[-1] == "Phase"
