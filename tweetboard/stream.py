'''
    stream
    ======

    Session around Twitter's filtered streams API.

    A session authenticates when created, and runs at most one filtered
    stream at a time. Received Tweets are checked against the filter and
    handed, one at a time and in order, to a single callback.

    The callback runs on the stream's background thread: a slow callback
    slows down the whole stream, so do not block inside it.

    # Sample Use

    .. code-block:: python

        import tweetboard

        stream = tweetboard.generate_stream()
        stream.callback(lambda tweet: print(tweet.user, tweet.text))
        stream.start()
        ...
        stream.stop()
'''

import requests
import threading
import tweepy

from . import api
from . import errors
from . import filters
from . import log
from . import tweet

# Logger for Stream.
LOGGER = log.new_logger('Stream')
# Errors from the transport wrapped by the session.
TRANSPORT_ERRORS = (tweepy.TweepyException, requests.RequestException)


class Twitter:
    '''
    Twitter session running a filtered stream.

    :param credentials: API keys to authenticate with.
    :param tweet_filter: Filter with at least 1 keyword.
    :param timeout: (Optional) Timeout for API requests, in seconds.
    :param client_factory: (Optional) Create the authenticated client.
    '''

    def __init__(
        self,
        credentials,
        tweet_filter,
        timeout=api.DEFAULT_TIMEOUT,
        client_factory=api.Client,
    ):
        if credentials is None:
            raise errors.NoAuthError()
        if tweet_filter is None or not tweet_filter.keywords:
            raise errors.EmptyFilterError()

        # Guards the subscription, thread and callback.
        self._lock = threading.Lock()
        self._callback = None
        self._filter = tweet_filter
        self._subscription = None
        self._thread = None
        self._client = client_factory(credentials, timeout=timeout)

        try:
            user = self._client.verify_credentials()
        except TRANSPORT_ERRORS as error:
            if api.is_authorization_error(error):
                LOGGER.warning('Twitter rejected the supplied credentials.')
            elif api.is_connection_error(error):
                LOGGER.warning('Unable to reach Twitter to verify credentials.')
            raise errors.AuthenticationError(error) from error
        if not user:
            raise errors.AuthenticationError()
        LOGGER.info('Authenticated to Twitter.')

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.stop()

    @property
    def filter(self):
        '''Get the session filter.'''
        return self._filter

    @property
    def is_running(self):
        '''Check if a stream is currently open.'''

        with self._lock:
            return self._subscription is not None

    def callback(self, function):
        '''Set the function called with each `Tweet` matching the filter.'''

        with self._lock:
            self._callback = function

    def start(self):
        '''
        Start the filtered stream and its receiver.

        This does not block: Tweets are received on a background thread
        until `stop` is called or Twitter closes the stream.
        '''

        with self._lock:
            if self._subscription is not None:
                raise errors.AlreadyStartedError()
            try:
                subscription = self._client.filter(
                    track=self._filter.keywords,
                    languages=self._filter.language,
                    stall_warnings=True,
                )
            except TRANSPORT_ERRORS as error:
                raise errors.SubscriptionError(error) from error

            self._subscription = subscription
            self._thread = threading.Thread(
                target=self._receive_all,
                args=(subscription,),
                name='tweetboard-stream',
                daemon=True,
            )
            self._thread.start()
        LOGGER.info(f'Started stream for keywords={list(self._filter.keywords)}.')

    def stop(self):
        '''Stop the filtered stream, if running.'''

        with self._lock:
            subscription = self._subscription
        if subscription is not None:
            LOGGER.info('Stopping stream.')
            subscription.stop()

    def wait(self, timeout=None):
        '''
        Wait for the current receiver to exit.

        Returns True if no receiver is still running.
        '''

        with self._lock:
            thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def receive(self, status):
        '''Filter and translate a status, and pass it to the callback.'''

        record = tweet.translate(status, self._filter)
        if record is None:
            return

        with self._lock:
            callback = self._callback
        if callback is not None:
            callback(record)

    def _receive_all(self, subscription):
        '''Receive messages until the subscription channel closes.'''

        try:
            for status in subscription.messages:
                self.receive(status)
        except Exception:
            LOGGER.exception('Stream callback failed, stopping stream.')
            subscription.stop()
            raise
        finally:
            with self._lock:
                if self._subscription is subscription:
                    self._subscription = None
            LOGGER.info('Stream closed.')


def generate_stream(timeout=api.DEFAULT_TIMEOUT):
    '''Generate the stream session from config.'''

    credentials = api.load_credentials()
    tweet_filter = filters.load_filter()
    return Twitter(credentials, tweet_filter, timeout=timeout)
