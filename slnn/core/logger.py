import logging
import os


DEFAULT_LOG_FILENAME = 'log.txt'

LINE_FORMAT = '[%(asctime)s] [%(name)s:%(lineno)d] %(levelname)-8s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def progress_message(msg, i, n):
    """ Prefix `msg` with the zero-padded counter "(i / n)"
    """
    return "(%0*d / %d) %s" % (len(str(n)), i, n, msg)


def log_training_progress(log, epoch, n_epochs, error):
    """ Log the mean squared training error of a (1-based) epoch
    """
    msg = "Training error: {:.6f}".format(error)
    log.info(progress_message(msg, epoch, n_epochs))


class CoreLogger(logging.Logger):
    """ A logger for training runs, writing to a log file and, optionally,
    to standard error as well
    """
    def __init__(self, filename=None, stdout=True, level=logging.DEBUG):
        """
        Parameters
        ----------
        filename: str, default=None
            The log file, overwritten on creation. Defaults to
            `log.txt` in the current directory.

        stdout: bool, default=True
            Also echo the records to a stream handler.

        level: int, default=logging.DEBUG
            The level of the logger.
        """
        logging.Logger.__init__(self, 'slnn training', level=level)

        self.file = filename or os.path.join(os.path.curdir,
                                             DEFAULT_LOG_FILENAME)
        self.stdout = stdout

        handlers = [logging.FileHandler(self.file, mode='w')]
        if self.stdout:
            handlers.append(logging.StreamHandler())

        formatter = logging.Formatter(
            fmt='[%(asctime)s] %(levelname)-8s %(message)s',
            datefmt=DATE_FORMAT)

        for handler in handlers:
            handler.setFormatter(formatter)
            self.addHandler(handler)

    def progress(self, msg, i, n):
        self.info(progress_message(msg, i, n))

    def close(self):
        """ Close and detach all handlers (releases the log file)
        """
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting for the root logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are written to this file (overwriting it),
        otherwise they are written to standard error.

    level: int, default=logging.INFO
        The logging level of the root logger.

    """
    if filename is not None and os.path.exists(filename):
        os.remove(filename)

    logging.basicConfig(
        filename=filename, format=LINE_FORMAT,
        datefmt=DATE_FORMAT, level=level)
