from .api import Credentials, load_credentials
from .errors import (
    AlreadyStartedError,
    AuthenticationError,
    ConfigurationError,
    EmptyFilterError,
    NoAuthError,
    SubscriptionError,
    TwitterError,
)
from .filters import Filter, load_filter
from .stream import Twitter, generate_stream
from .tweet import Tweet
