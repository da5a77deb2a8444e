import io
import json
import logging
import os
import sys

import pytest

from cssforge.cli import build_from_tokens, main
from cssforge.logging_config import JsonFormatter, configure_logging
from cssforge.selectors import FragmentOrderViolation, UnknownFragmentKind


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("CSSFORGE_"):
            monkeypatch.delenv(key)
    yield
    package_logger = logging.getLogger("cssforge")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


def test_build_from_tokens_single_compound():
    selector = build_from_tokens(["element=a", "attr=href", "pseudoClass=hover"])
    assert selector.stringify() == "a[href]:hover"


def test_build_from_tokens_nests_combinators_to_the_right():
    selector = build_from_tokens(["element=a", "~", "element=b", "descendant", "element=c"])
    assert selector.stringify() == "a ~ b   c"


def test_build_from_tokens_rejects_bad_input():
    with pytest.raises(FragmentOrderViolation):
        build_from_tokens(["class=x", "element=div"])
    with pytest.raises(UnknownFragmentKind):
        build_from_tokens(["tag=div"])


def test_cli_build(capsys):
    assert main(["build", "element=div", "id=main", ">", "class=item"]) == 0
    assert capsys.readouterr().out == "div#main > .item\n"


def test_cli_build_reports_validation_errors(capsys):
    assert main(["build", "id=a", "id=b"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "should not occur more than once" in captured.err


def test_cli_build_requires_fragment_on_both_sides_of_combinator(capsys):
    assert main(["build", "element=div", "+"]) == 2
    assert "expected at least one" in capsys.readouterr().err


def test_cli_build_rejects_token_without_value(capsys):
    assert main(["build", "div"]) == 2
    assert "kind=value" in capsys.readouterr().err


def test_cli_area(capsys):
    assert main(["area", "10", "20"]) == 0
    assert capsys.readouterr().out == "200\n"


def test_cli_encode(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"b": [1, 2], "a": "ü"}'))
    assert main(["encode"]) == 0
    assert capsys.readouterr().out == '{"b":[1,2],"a":"ü"}\n'


def test_cli_encode_invalid_json(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("{nope"))
    assert main(["encode"]) == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_cli_missing_config(capsys, tmp_path):
    assert main(["--config", str(tmp_path / "nope.toml"), "area", "1", "1"]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_cli_bad_log_level(capsys):
    assert main(["--log-level", "loud", "area", "1", "1"]) == 2
    assert "unknown log level" in capsys.readouterr().err


def test_configure_logging_jsonl():
    stream = io.StringIO()
    configure_logging(level="info", jsonl=True, stream=stream)
    logging.getLogger("cssforge.test").info("hello %s", "there")
    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["message"] == "hello there"
    assert record["level"] == "INFO"
    assert record["logger"] == "cssforge.test"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("cssforge").makeRecord(
            "cssforge", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_cli_malformed_config(capsys, tmp_path):
    config = tmp_path / "broken.toml"
    config.write_text("[logging\nlevel = ", encoding="utf-8")
    assert main(["--config", str(config), "area", "1", "1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_configure_logging_does_not_duplicate_through_root():
    root_handler = _ListHandler()
    logging.getLogger().addHandler(root_handler)
    try:
        stream = io.StringIO()
        configure_logging(level="info", stream=stream)
        logging.getLogger("cssforge.test").info("once")
    finally:
        logging.getLogger().removeHandler(root_handler)
    assert stream.getvalue().count("once") == 1
    assert root_handler.records == []
