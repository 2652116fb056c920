import logging

from dimunit.config import GetSettings

logger = logging.getLogger("dimunit")
logger.addHandler(logging.NullHandler())
logger.setLevel(GetSettings().log_level)


def GetLogger():
    return logger


def Warn(message):
    logger.warning(message)


def Info(message):
    logger.info(message)


def Debug(message):
    logger.debug(message)


def SetLoggingLevel(level):
    logger.setLevel(level)
