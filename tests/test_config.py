from restful.config import RESTConfig


def test_config_defaults():
    cfg = RESTConfig()
    assert cfg.default_content_type == "application/json"
    assert cfg.freeze_registries is False
    assert cfg.json_logging is False


def test_config_overrides():
    cfg = RESTConfig(default_content_type="application/php-serialized", json_logging=True)
    assert cfg.default_content_type == "application/php-serialized"
    assert cfg.json_logging
