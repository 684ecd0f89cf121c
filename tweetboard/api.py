'''
    api
    ===

    High-level utility to access the Twitter API and its filtered stream.

    Update config/api.json to update credentials.
'''

import dataclasses
import json
import os
import requests
import tweepy

from . import path
from .subscription import Subscription

# Default timeout is set to 5 seconds.
DEFAULT_TIMEOUT = 5


@dataclasses.dataclass(frozen=True)
class Credentials:
    '''Store the Twitter API keys. Secrets are hidden from the repr.'''

    consumer_key: str
    consumer_secret: str = dataclasses.field(repr=False)
    access_token: str
    access_token_secret: str = dataclasses.field(repr=False)

    @classmethod
    def from_dict(cls, data):
        '''Create credentials from the JSON config layout.'''

        return cls(
            consumer_key=data['consumer_key'],
            consumer_secret=data['consumer_secret'],
            access_token=data['access_token'],
            access_token_secret=data['access_token_secret'],
        )


def load_credentials(filename=None):
    '''Read the credentials from `config/api.json`, or a supplied path.'''

    if filename is None:
        filename = os.path.join(path.config_dir(), 'api.json')
    with open(filename) as f:
        return Credentials.from_dict(json.load(f))


# ERRORS
# ------


def is_connection_error(error):
    '''Determine if an error is a connection error.'''

    if isinstance(error, requests.RequestException):
        return True
    return str(error).startswith('Failed to send request')


def is_authorization_error(error):
    '''Determine if a error is a authorization error.'''
    return isinstance(error, tweepy.Unauthorized)


# CLIENT
# ------


class Client:
    '''
    Authenticated Twitter client.

    Holds the OAuth 1.0a user context, shared by the REST API used to
    verify the credentials and by every filtered stream it opens.
    '''

    def __init__(self, credentials, timeout=DEFAULT_TIMEOUT):
        self._keys = (
            credentials.consumer_key,
            credentials.consumer_secret,
            credentials.access_token,
            credentials.access_token_secret,
        )
        self.auth = tweepy.OAuth1UserHandler(*self._keys)
        # Do not sleep on rate limits: a failed verification is reported
        # to the caller immediately.
        self.api = tweepy.API(self.auth, timeout=timeout)

    def verify_credentials(self):
        '''Check the credentials are valid, returning the authenticated user.'''
        return self.api.verify_credentials()

    def filter(self, track, languages=None, stall_warnings=True):
        '''
        Open a filtered stream in a background thread.

        :param track: Keywords to track.
        :param languages: (Optional) Only return Tweets in these languages.
        :param stall_warnings: (Optional) Request warnings if we fall behind.
        '''

        subscription = Subscription(*self._keys)
        subscription.filter(
            track=list(track),
            languages=list(languages or []) or None,
            stall_warnings=stall_warnings,
            threaded=True,
        )
        return subscription
