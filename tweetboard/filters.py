'''
    filters
    =======

    Client-side filter applied to every Tweet received from the stream.

    The keywords and languages are only sent to Twitter as stream
    parameters. The user and word lists are checked locally, in order:

    1. Tweets by blocked users are rejected.
    2. Tweets containing a blocked word (case-sensitive substring) are rejected.
    3. If `only_users` is set, only Tweets by those users are accepted.
    4. Everything else is accepted.

    An empty list is never a constraint. User screen names are compared
    case-insensitively.

    # Sample Use

    .. code-block:: python

        tweet_filter = Filter(keywords=['python'], blocked_words=['giveaway'])
        tweet_filter.match('Jack', 'python 3.13 is out')
'''

import dataclasses
import json
import os
import typing

from . import path


def as_tuple(value):
    '''Normalize an optional string or iterable of strings to a tuple.'''

    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclasses.dataclass(frozen=True)
class Filter:
    '''Stream parameters and allow/deny lists for Tweets.'''

    language: typing.Tuple[str, ...] = ()
    keywords: typing.Tuple[str, ...] = ()
    only_users: typing.Tuple[str, ...] = ()
    blocked_users: typing.Tuple[str, ...] = ()
    blocked_words: typing.Tuple[str, ...] = ()

    def __post_init__(self):
        for field in dataclasses.fields(self):
            object.__setattr__(self, field.name, as_tuple(getattr(self, field.name)))

    @classmethod
    def from_dict(cls, data):
        '''Create filter from the JSON config layout.'''

        return cls(
            language=data.get('language'),
            keywords=data.get('keywords'),
            only_users=data.get('only_users'),
            blocked_users=data.get('blocked_users'),
            blocked_words=data.get('banned_words'),
        )

    def match(self, user: str, text: str) -> bool:
        '''Check if a Tweet by screen name `user` with `text` passes the filter.'''

        user = user.lower()
        if self.blocked_users:
            if any(i.lower() == user for i in self.blocked_users):
                return False
        if self.blocked_words:
            if any(i in text for i in self.blocked_words):
                return False
        if self.only_users:
            return any(i.lower() == user for i in self.only_users)
        return True


def load_filter(filename=None):
    '''Read the filter from `config/filter.json`, or a supplied path.'''

    if filename is None:
        filename = os.path.join(path.config_dir(), 'filter.json')
    with open(filename) as f:
        return Filter.from_dict(json.load(f))
