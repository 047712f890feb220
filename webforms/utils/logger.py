import logging
import colorlog

from webforms import settings

class Logger:
    def __init__(self, name: str, level=None):
        self.logger = colorlog.getLogger(name)
        self.logger.setLevel(settings.LOG_LEVEL if level is None else level)

        if not self.logger.handlers:
            handler = colorlog.StreamHandler()

            formatter = colorlog.ColoredFormatter(
                '%(log_color)s%(levelname)s:%(name)s:%(message)s',
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'bold_red',
                }
            )

            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, message):
        self.logger.debug(message)

    def info(self, message):
        self.logger.info(message)

    def warning(self, message):
        self.logger.warning(message)

    def error(self, message):
        self.logger.error(message)
