# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Logging for the emerge applications.

The update engine itself never logs, only the command line does.
"""

import logging


LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')

LOG_FORMAT = '[%(levelname)1.1s %(module)s] %(message)s'

logger = logging.getLogger('emerge')


def init_logging(level_name='INFO'):
    """Install a stderr handler and apply the named level.

    Called once per application run; repeated calls only change
    the level, since basicConfig leaves existing handlers alone.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.captureWarnings(True)
    set_log_level(level_name)


def set_log_level(level_name):
    "Set the level of both the emerge logger and the root logger by name."
    level = getattr(logging, level_name)
    logger.setLevel(level)
    logging.getLogger().setLevel(level)
