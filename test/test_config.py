# test/test_config.py

import json
import os
import sys
import tempfile
import traceback
from contextlib import contextmanager
from pathlib import Path

os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="scanner_test_"))

PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from core.config_loader import load_config, load_raw_config, normalize_locale, parse_bool
from core.config_schema import ScannerConfig
from scanner.messages import SpanishMessages
from scanner.reader import ValidatedReader

ENV_KEYS = ("SCANNER_LOCALE", "SCANNER_ENCODING", "SCANNER_LOG_EVENTS")


@contextmanager
def scanner_env(**values):
    saved = {k: os.environ.pop(k, None) for k in ENV_KEYS}
    os.environ.update(values)
    try:
        yield
    finally:
        for k in ENV_KEYS:
            os.environ.pop(k, None)
            if saved[k] is not None:
                os.environ[k] = saved[k]


@contextmanager
def config_file(data: dict):
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "scanner_config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        yield path


def test_defaults():
    print("\n--- Test: schema defaults ---")
    config = ScannerConfig()
    assert config.locale == "en"
    assert config.encoding == "utf-8"
    assert config.log_events is False


def test_shipped_config_loads():
    print("\n--- Test: shipped config file ---")
    raw = load_raw_config(PROJECT_ROOT / "config" / "scanner_config.json")
    with scanner_env():
        config = load_config(PROJECT_ROOT / "config" / "scanner_config.json")
    assert raw["locale"] == config.locale == "en"


def test_file_values_and_locale_normalization():
    print("\n--- Test: locale normalization from file ---")
    with config_file({"locale": "es_ES.UTF-8", "encoding": "LATIN-1", "log_events": False}) as path:
        with scanner_env():
            config = load_config(path)
    assert config.locale == "es"
    assert config.encoding == "iso8859-1"
    assert config.log_events is False


def test_env_overrides_file():
    print("\n--- Test: env overrides ---")
    with config_file({"locale": "en", "log_events": True}) as path:
        with scanner_env(SCANNER_LOCALE="Español", SCANNER_LOG_EVENTS="off"):
            config = load_config(path)
    assert config.locale == "es"
    assert config.log_events is False


def test_bad_locale_rejected():
    print("\n--- Test: bad config schema rejection ---")
    with config_file({"locale": "klingon"}) as path:
        with scanner_env():
            try:
                load_config(path)
                assert False, "Schema validation should fail"
            except RuntimeError as e:
                assert "Configuration validation failed" in str(e)


def test_bad_encoding_rejected():
    with config_file({"encoding": "no-such-codec"}) as path:
        with scanner_env():
            try:
                load_config(path)
                assert False, "Schema validation should fail"
            except RuntimeError as e:
                assert "unknown encoding" in str(e)


def test_missing_explicit_config_file():
    try:
        load_config(Path(tempfile.gettempdir()) / "definitely_missing_scanner.json")
        assert False, "Expected FileNotFoundError"
    except FileNotFoundError:
        pass


def test_helpers():
    assert normalize_locale("en-US") == "en"
    assert normalize_locale("English") == "en"
    assert normalize_locale("  ES ") == "es"
    assert parse_bool("Yes") is True
    assert parse_bool("0") is False
    try:
        parse_bool("maybe")
        assert False, "Expected ValueError"
    except ValueError:
        pass


def test_reader_from_config():
    print("\n--- Test: reader built from config ---")
    config = ScannerConfig(locale="es", log_events=False)

    class Silent:
        def __init__(self):
            self.shown = []

        def prompt(self, message):
            self.shown.append(message)

        def ask(self, question):
            pass

    adapter = Silent()
    reader = ValidatedReader.from_config("x\n3\n", config, io_adapter=adapter)
    assert isinstance(reader.messages, SpanishMessages)
    assert reader.read_int("n: ") == 3
    assert adapter.shown == ["El valor no es un entero válido."]


def run_all():
    print("\n=== Config Test Run ===")
    tests = [obj for name, obj in sorted(globals().items()) if name.startswith("test_") and callable(obj)]
    try:
        for test in tests:
            test()
        print("\n✅ ALL CONFIG TESTS PASSED.")
    except AssertionError as e:
        print("\n❌ Assertion failed:", e)
        traceback.print_exc()
    except Exception:
        print("\n❌ Unexpected error during testing:")
        traceback.print_exc()

if __name__ == "__main__":
    run_all()
