from licgate.common.config import Config


def test_config_network_defaults() -> None:
    assert Config.DEFAULT_HOST == "0.0.0.0"  # noqa: S104
    assert Config.DEFAULT_PORT == 8080  # noqa: PLR2004
    assert Config.HOST_ENV == "HOST"
    assert Config.PORT_ENV == "PORT"


def test_config_license_format() -> None:
    assert Config.LICENSE_DELIMITER == b":"


def test_config_paths_layout() -> None:
    assert Config.APP_NAME == "licgate"
    assert Config.DATABASE_FILENAME == "licgate.db"
