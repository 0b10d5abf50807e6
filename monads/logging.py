import logging


def logger():
    return logging.getLogger("monads")
