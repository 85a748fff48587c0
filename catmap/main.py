"""Точка входа в приложение."""
import logging
import os

from catmap.app import CatMapApp
from catmap.logging_config import setup_logging


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно."""
    level = logging.DEBUG if os.environ.get("CATMAP_DEBUG") else logging.INFO
    setup_logging(level=level, log_file=os.environ.get("CATMAP_LOG_FILE"))
    app = CatMapApp()
    app.mainloop()


if __name__ == "__main__":
    main()
