'''
    errors
    ======

    Errors raised by the Twitter stream session.

    Every error may carry the underlying transport error as `cause`,
    which is also chained as `__cause__` when raised.
'''


class TwitterError(Exception):
    '''Base error for the Twitter stream session.'''

    message = 'twitter stream error'

    def __init__(self, cause=None):
        self.cause = cause
        if cause is None:
            super().__init__(self.message)
        else:
            super().__init__(f'{self.message}: {cause}')


# CONFIGURATION
# -------------


class ConfigurationError(TwitterError, ValueError):
    '''Invalid session input, detected before any network call.'''

    message = 'invalid twitter configuration'


class NoAuthError(ConfigurationError):
    '''The supplied credentials are None.'''

    message = 'twitter credentials cannot be None'


class EmptyFilterError(ConfigurationError):
    '''The supplied keyword filter is None or empty.'''

    message = 'twitter stream filter cannot be empty or None'


# STATE
# -----


class AlreadyStartedError(TwitterError, RuntimeError):
    '''An attempt was made to start a stream that is currently running.'''

    message = 'twitter stream already started'


# TRANSPORT
# ---------


class AuthenticationError(TwitterError):
    '''Twitter rejected the credentials, or could not be reached.'''

    message = 'cannot authenticate to Twitter'


class SubscriptionError(TwitterError):
    '''The filtered stream could not be opened.'''

    message = 'unable to start Twitter filter'
