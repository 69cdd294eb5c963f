import logging

LOG_FILE_PATH = "bookshelf.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'

def setup_global_logger(log_file_path=LOG_FILE_PATH, level=logging.INFO):
    """
    Configures the root logger to write to the console and, if `log_file_path` is set, to a file.
    Calling it again reuses the existing handlers and moves them to the new level.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # Prevent duplicate handlers if this function is called multiple times
    console_handler = next(
        (handler for handler in logger.handlers if type(handler) is logging.StreamHandler), None
    )
    file_handler = next(
        (handler for handler in logger.handlers
         if type(handler) is logging.FileHandler and handler.baseFilename.endswith(log_file_path)),
        None
    ) if log_file_path else None

    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    console_handler.setLevel(level)

    if log_file_path:
        if file_handler is None:
            file_handler = logging.FileHandler(log_file_path, mode='a')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        file_handler.setLevel(level)

    logging.info(f"Global logger configured. File: {log_file_path or 'disabled'}, level: {logging.getLevelName(level)}")
