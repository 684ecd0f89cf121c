'''
    log
    ===

    High-level logger for the stream session and its transport.
'''

import datetime
import logging
import os

from . import path

def log_name():
    '''Get date/time-based log name.'''
    return '{:%Y-%m-%d-%H-%M-%S}.log'.format(datetime.datetime.now())

def new_logger(name):
    '''Define a new logger.'''

    logger = logging.getLogger(f'tweetboard.{name}')
    logger.setLevel(logging.DEBUG)

    # Add the handlers to logger, once per name.
    if not logger.handlers:
        logger.addHandler(STREAM_HANDLER)
        logger.addHandler(FILE_HANDLER)

    return logger

def override_tweepy_logger():
    '''Route Tweepy's own log records (reconnects, HTTP errors) to our handlers.'''

    # Tweepy logs from module-level loggers under the `tweepy` namespace.
    logger = logging.getLogger('tweepy')
    if STREAM_HANDLER not in logger.handlers:
        logger.addHandler(STREAM_HANDLER)
        logger.addHandler(FILE_HANDLER)


os.makedirs(path.log_dir(), exist_ok=True)
CURRENT_LOG_NAME = log_name()
CURRENT_LOG_PATH = os.path.join(path.log_dir(), CURRENT_LOG_NAME)

# File Handler
FILE_HANDLER = logging.FileHandler(CURRENT_LOG_PATH, delay=True)
FILE_HANDLER.setLevel(logging.DEBUG)

# Stderr Handler
STREAM_HANDLER = logging.StreamHandler()
STREAM_HANDLER.setLevel(logging.WARNING)

# Create formatter and add it to the handlers
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
STREAM_HANDLER.setFormatter(formatter)
FILE_HANDLER.setFormatter(formatter)
