"""Global test configuration for markup2text tests."""

import tempfile
from pathlib import Path

import pytest
import structlog

from markup2text.core import config


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logger configuration bound to streams of a previous test."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep config files and env vars of the developer machine out of tests."""
    for name in ["CONVERSION", "OUTPUT_SUFFIX", "OUTPUT_ENCODING", "LOG_FORMAT", "LOG_LEVEL", "XML_RECOVER"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    # The CLI replaces the module-level defaults
    monkeypatch.setattr(config, "SETTINGS", config.Settings())


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tei_xml():
    """TEI letter edition with two divisions, a footnote and a line-end hyphen."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<TEI xmlns="http://www.tei-c.org/ns/1.0">
  <teiHeader>
    <fileDesc><titleStmt><title>Briefe</title></titleStmt></fileDesc>
  </teiHeader>
  <text>
    <body>
      <div>
        <head>Erster Brief</head>
        <p>Es war einmal... ein Haupt-
und Nebensatz.</p>
      </div>
      <div>
        <head>Zweiter Brief</head>
        <p>Zweiter Text<note place="foot">Anmerkung</note> endet.</p>
      </div>
    </body>
  </text>
</TEI>"""


@pytest.fixture
def sample_xhtml_xml():
    """XHTML page with a list, a footnote, a table of contents and an image."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>Seite</title></head>
<body>
<h1>Titel</h1>
<p>Ein Satz mit Um-<br/>bruch und <span class="footnote">Note</span> Ende.</p>
<ul><li>eins</li><li>zwei</li></ul>
<div class="toc">Inhalt</div>
<img src="bild.png"/>
</body>
</html>"""
