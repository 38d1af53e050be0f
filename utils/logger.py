# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

def setup_logger(log_dir: str | Path = "data/logs"):
    """
    Configure the logger of the cash register.

    Features:
    - Daily rotating log files (one file per day, a week kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates directories automatically

    Modules log through child loggers ("cash_register.register", ...),
    which propagate to the handlers set up here.
    """

    # Create log directory if not exists
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Log file base name
    log_file = log_dir / "cash_register.log"

    logger = logging.getLogger("cash_register")
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    # Formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Add handlers
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
