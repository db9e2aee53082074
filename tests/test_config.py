import logging

from movie_rental_api.app.core.config import Settings, settings
from movie_rental_api.app.core.db import get_database_path
from movie_rental_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


def test_settings_come_from_environment():
    # Set in conftest before the package was imported.
    assert settings.storage_backend == "memory"
    assert settings.secret_key == "test-secret"
    assert settings.password_hash_iterations == 1000


def test_default_email_domains():
    config = Settings()

    assert config.user_email_domain == "@gmail.com"
    assert config.admin_email_domain == "@admin.com"


def test_relative_database_path_is_resolved_under_package(tmp_path):
    absolute = str(tmp_path / "x.db")

    assert get_database_path(absolute) == absolute
    assert get_database_path("rental.db").endswith("movie_rental_api/rental.db")


def test_setup_logging_sets_package_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous = package_logger.level
    try:
        setup_logging("debug")
        assert package_logger.level == logging.DEBUG
        setup_logging("nonsense")
        assert package_logger.level == logging.INFO
    finally:
        package_logger.setLevel(previous)
