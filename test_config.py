import logging

from skugen.config import configure_logging, load_default_settings, load_environment
from skugen.schemas import AppSettings, SpecValue


def test_defaults_without_environment(monkeypatch):
    for name in ("SKU_DELIMITER", "SKU_PREFIX", "SKU_SUFFIX"):
        monkeypatch.delenv(name, raising=False)
    assert load_default_settings() == AppSettings(delimiter="-", prefix="", suffix="")


def test_env_file_is_loaded(tmp_path, monkeypatch):
    # registers SKU_SUFFIX with monkeypatch so the loaded value is undone afterwards
    monkeypatch.setenv("SKU_SUFFIX", "")
    env_file = tmp_path / ".env"
    env_file.write_text("SKU_SUFFIX=-EU\n")

    assert load_environment(env_file)
    assert load_default_settings().suffix == "-EU"


def test_missing_env_file(tmp_path, caplog):
    missing = tmp_path / "nope.env"
    with caplog.at_level(logging.WARNING, logger="skugen.config"):
        assert load_environment(missing) is False
    assert f".env file not found at {missing}" in caplog.text


def test_configure_logging_warns_on_unknown_level(monkeypatch, caplog):
    monkeypatch.setenv("SKUGEN_LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING, logger="skugen.config"):
        configure_logging()
    assert "Unknown log level CHATTY" in caplog.text


def test_camel_case_aliases_are_accepted():
    value = SpecValue.model_validate({"id": "v1", "displayValue": "Red", "skuFragment": "R"})
    assert (value.display_value, value.sku_fragment) == ("Red", "R")
    assert value.model_dump(by_alias=True) == {"id": "v1", "displayValue": "Red", "skuFragment": "R"}
