# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Package-wide defaults

``logger`` is the default logger (python log instance).  Parsing writes one
debug message per brain model node, and file readers write info messages when
asked to be verbose.

To set the log level (log message appears for problem of level >= log level),
use e.g. ``logger.level = 10`` to see the per-node messages.

As for most loggers, if ``logger.level == 0`` then a default log level is used -
use ``logger.getEffectiveLevel()`` to see what that default is.
"""
import logging

logger = logging.getLogger('ciftimodels.global')
logger.addHandler(logging.StreamHandler())


class LoggingOutputSuppressor:
    """Context manager to prevent global logger from printing"""

    def __enter__(self):
        self.orig_handlers = list(logger.handlers)
        for handler in self.orig_handlers:
            logger.removeHandler(handler)

    def __exit__(self, exc, value, tb):
        for handler in self.orig_handlers:
            logger.addHandler(handler)
