import json
import os
import sys
import xml.etree.ElementTree as ET

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

import main
from wp_blog_import.import_tool import MISSING_XML_MESSAGE, WordPressImportTool
from wp_blog_import.models.import_post import ImportOptions
from wp_blog_import.transformers.post_transformer import DRAFT_NOTICE
from wp_blog_import.utils.errors import ConfigurationError, ImportFailedError, ParseError

EXPORT = os.path.join(os.path.dirname(__file__), "data", "wordpress_export.xml")


class RecordingImporter:
    def __init__(self, fail=False):
        self.fail = fail
        self.documents = []

    def run(self, forwarded):
        with open(forwarded["posts"], encoding="utf-8") as f:
            self.documents.append(f.read())
        if self.fail:
            raise ImportFailedError("importer crashed")


def read_jsonl(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f]


@pytest.fixture
def tool(tmp_path):
    return WordPressImportTool({"reports": {"dir": str(tmp_path / "reports")}})


def test_config_defaults(tool):
    assert tool.config["importer"]["type"] == "command"
    assert tool.config["importer"]["command"] == ["php", "symfony", "apostrophe:blog-import"]
    assert set(tool.config["importer"]) == {"type", "command"}


def test_config_file_is_loaded(tmp_path):
    config_file = tmp_path / "import_config.json"
    config_file.write_text(json.dumps({"importer": {"cwd": "/srv/site"}}), encoding="utf-8")
    tool = WordPressImportTool(config_file=str(config_file))
    assert tool.config["importer"]["cwd"] == "/srv/site"
    assert tool.config["importer"]["command"] == ["php", "symfony", "apostrophe:blog-import"]


def test_malformed_config_file_raises_configuration_error(tmp_path):
    config_file = tmp_path / "import_config.json"
    config_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="import_config.json"):
        WordPressImportTool(config_file=str(config_file))


def test_config_file_must_hold_object(tmp_path):
    config_file = tmp_path / "import_config.json"
    config_file.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        WordPressImportTool(config_file=str(config_file))


def test_convert_end_to_end(tool):
    document, result = tool.convert(ImportOptions(xml=EXPORT))
    root = ET.fromstring(document.encode("utf-8"))
    posts = root.findall("post")
    assert len(posts) == 1
    assert posts[0].findtext("title") == "Hello"
    assert posts[0].get("slug") == "hello"
    assert posts[0].findtext("location") == "40.0, -73.0"
    assert [c.text for c in posts[0].find("categories")] == ["News & Views", "admin"]
    assert [t.text for t in posts[0].find("tags")] == ["Travel"]
    assert result.notices == [DRAFT_NOTICE]
    assert result.skip_counts() == {"DRAFT": 1, "NOT_A_POST": 2}


def test_convert_writes_reports(tool, tmp_path):
    tool.convert(ImportOptions(xml=EXPORT))
    reports = tmp_path / "reports"
    skipped = read_jsonl(reports / "skipped.jsonl")
    assert [entry["code"] for entry in skipped] == ["DRAFT", "NOT_A_POST", "NOT_A_POST"]
    assert read_jsonl(reports / "success.jsonl")[0]["slug"] == "hello"
    log = (reports / "import.log").read_text(encoding="utf-8")
    assert f"WARNING: {DRAFT_NOTICE}" in log


def test_convert_requires_xml(tool):
    with pytest.raises(ConfigurationError, match="--xml=filename"):
        tool.convert(ImportOptions())


def test_convert_unreadable_export(tool, tmp_path):
    with pytest.raises(ParseError):
        tool.convert(ImportOptions(xml=str(tmp_path / "missing.xml")))


def test_run_hands_document_to_importer(tool):
    importer = RecordingImporter()
    result = tool.run(ImportOptions(xml=EXPORT, disqus=True), importer=importer)
    assert len(result.posts) == 1
    (document,) = importer.documents
    assert 'disqus_thread_identifier="12 http://blog.example.com/?p=12"' in document


def test_run_reports_importer_failure(tool, tmp_path):
    with pytest.raises(ImportFailedError):
        tool.run(ImportOptions(xml=EXPORT), importer=RecordingImporter(fail=True))
    (entry,) = read_jsonl(tmp_path / "reports" / "errors.jsonl")
    assert entry["code"] == "IMPORT_FAILED"
    assert entry["error"] == "importer crashed"


def test_run_with_output_skips_importer(tool, tmp_path):
    output = tmp_path / "out" / "posts.xml"
    importer = RecordingImporter()
    tool.run(ImportOptions(xml=EXPORT, output=str(output)), importer=importer)
    assert importer.documents == []
    assert "<title>Hello</title>" in output.read_text(encoding="utf-8")


def test_main_missing_xml_exits_1(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main.main([]) == 1
    assert MISSING_XML_MESSAGE in capsys.readouterr().out


def test_main_unparsable_export_exits_1(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    broken = tmp_path / "broken.xml"
    broken.write_text("<rss>", encoding="utf-8")
    assert main.main([f"--xml={broken}"]) == 1
    assert "Unable to open or parse XML file" in capsys.readouterr().out


def test_main_writes_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "posts.xml"
    status = main.main([
        f"--xml={EXPORT}", f"--output={output}", "--categories-as-tags", "--category=Blog", "--ignore-empty-title",
    ])
    assert status == 0
    root = ET.fromstring(output.read_bytes())
    post = root.find("post")
    assert [c.text for c in post.find("categories")] == ["Blog"]
    assert [t.text for t in post.find("tags")] == ["News & Views", "Travel"]


def test_main_importer_failure_exits_1(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"importer": {"type": "command", "command": ["wp-blog-import-missing-cmd"]}}))
    assert main.main([f"--xml={EXPORT}", f"--config={config_file}"]) == 1


def test_main_malformed_config_exits_1(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "config.json"
    config_file.write_text("{\"importer\": ", encoding="utf-8")
    assert main.main([f"--xml={EXPORT}", f"--config={config_file}"]) == 1
    assert "Could not read configuration file" in capsys.readouterr().out


def test_parse_args_defaults():
    options = main.options_from_args(main.parse_args(["--xml=x.xml"]))
    assert options.env == "dev"
    assert options.connection == "doctrine"
    assert options.default_username == "admin"
    assert options.category == "admin"
    assert options.ignore_empty_title is False
    assert options.disqus is False
