import logging
from pathlib import Path

from rich.logging import RichHandler

from bibview.core.logging import configure_logging


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_bibview_handler", False)]


def test_configure_logging_replaces_its_own_handler(tmp_path: Path) -> None:
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging(0)
        assert root.level == logging.WARNING
        assert isinstance(_own_handlers()[0], RichHandler)

        log_path = tmp_path / "logs" / "bibview.log"
        configure_logging(2, log_path=log_path)
        handlers = _own_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.FileHandler)
        assert root.level == logging.DEBUG

        logging.getLogger("bibview.test").debug("hello file")
        handlers[0].flush()
        assert "hello file" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in _own_handlers():
            root.removeHandler(handler)
            handler.close()
        root.setLevel(previous_level)
