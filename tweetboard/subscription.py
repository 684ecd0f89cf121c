'''
    subscription
    ============

    Filtered stream handle around Twitter's filtered streams API.

    Tweepy reads the stream in its own thread and forwards every status
    into a closable channel, which the stream session drains.

    For documentation reference, see:
        https://developer.twitter.com/en/docs/twitter-api/v1/tweets/filter-realtime/guides/basic-stream-parameters
'''

import queue
import tweepy

from . import log

# Logger for Subscription.
LOGGER = log.new_logger('Subscription')
log.override_tweepy_logger()
# Sentinel marking the end of a channel.
CLOSED = object()


class Channel:
    '''
    Thread-safe, closable FIFO of raw messages.

    Iterating blocks for the next message, and stops once the channel
    is closed and every message put before the close has been read.
    '''

    def __init__(self):
        self._queue = queue.Queue()

    def put(self, message):
        '''Add a message to the channel.'''
        self._queue.put(message)

    def close(self):
        '''Close the channel. Closing more than once is harmless.'''
        self._queue.put(CLOSED)

    def __iter__(self):
        return iter(self._queue.get, CLOSED)


class Subscription(tweepy.Stream):
    '''Filtered stream forwarding statuses to `messages`.'''

    def __init__(
        self,
        consumer_key,
        consumer_secret,
        access_token,
        access_token_secret,
        **kwds
    ):
        # Never keep the interpreter alive for a stream nobody stopped.
        kwds.setdefault('daemon', True)
        super().__init__(
            consumer_key,
            consumer_secret,
            access_token,
            access_token_secret,
            **kwds
        )
        self.messages = Channel()
        self._stopped = False

    def on_connect(self):
        super().on_connect()
        self._disconnect_if_stopped()

    def on_data(self, raw_data):
        if self._disconnect_if_stopped():
            return
        return super().on_data(raw_data)

    def on_keep_alive(self):
        super().on_keep_alive()
        self._disconnect_if_stopped()

    def on_connection_error(self):
        super().on_connection_error()
        self._disconnect_if_stopped()

    def on_request_error(self, status_code):
        super().on_request_error(status_code)
        self._disconnect_if_stopped()

    def on_status(self, status):
        self.messages.put(status)

    def on_warning(self, notice):
        LOGGER.warning(f'Stall warning from Twitter: {notice}')

    def on_disconnect(self):
        '''Called once Tweepy gives up on the connection, or after `stop`.'''

        LOGGER.info('Stream disconnected.')
        self.messages.close()

    def stop(self):
        '''Signal the stream to terminate.'''

        # Tweepy sets `running` again when its thread first connects, so
        # `stop` may run before it: the flag is re-checked on every event.
        # Tweepy only notices the disconnect on the next line or keep-alive,
        # so close the channel now and let any queued statuses drain.
        self._stopped = True
        self.disconnect()
        self.messages.close()

    def _disconnect_if_stopped(self):
        '''Disconnect if `stop` was called. Returns True if stopped.'''

        if self._stopped:
            self.disconnect()
        return self._stopped
