import logging
import os


DEFAULT_LOG_FILENAME = 'fit-log.txt'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, level=logging.DEBUG, stdout=True):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        The log file, which is truncated if it exists. The default (None)
        uses `fit-log.txt` in the current directory.

    level: int, default=logging.DEBUG
        The level of the root logger.

    stdout: bool, default=True
        If True, log records are also written to the console.

    Returns
    -------
    filename: str
        The absolute path of the log file.
    """
    filename = os.path.abspath(
        filename or os.path.join(os.path.curdir, DEFAULT_LOG_FILENAME))

    handlers = [logging.FileHandler(filename, mode='w')]
    if stdout:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        format=LINE_FORMAT, datefmt=DATE_FORMAT, level=level,
        handlers=handlers, force=True)

    return filename


def progress(logger, msg, i, n):
    """ Log `msg` at INFO level prefixed by a zero-padded `(i / n)` counter
    """
    logger.info("(%0*d / %d) %s", len(str(n)), i, n, msg)
