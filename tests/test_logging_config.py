from quizgame.utils.logging_config import configure_logging


def test_configure_logging_returns_package_logger():
    logger = configure_logging()
    assert logger.name == "quizgame"
