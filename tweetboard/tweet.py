'''
    tweet
    =====

    Simplified Tweet record handed to stream callbacks, and the
    translation from full Tweepy statuses.
'''

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Tweet:
    '''Abstract out the non-important Tweet data.'''

    id: int
    user: str
    text: str
    time: int = 0
    images: typing.Tuple[str, ...] = ()
    user_name: str = ''
    user_photo: str = ''


def status_text(status):
    '''Get the full text of a status, expanding truncated Tweets.'''

    if getattr(status, 'truncated', False) and hasattr(status, 'extended_tweet'):
        return status.extended_tweet['full_text']
    return status.text


def status_media(status):
    '''Get the list of media entities attached to a status.'''

    # Extended entities hold every attachment, entities only the first.
    # Truncated Tweets keep both under `extended_tweet`.
    if getattr(status, 'truncated', False) and hasattr(status, 'extended_tweet'):
        source = status.extended_tweet
    else:
        source = vars(status)
    for key in ('extended_entities', 'entities'):
        entities = source.get(key) or {}
        if 'media' in entities:
            return entities['media']
    return []


def extract_images(media):
    '''Extract the URLs of all photos, in order. Videos and GIFs are skipped.'''
    return tuple(i['media_url_https'] for i in media if i['type'] == 'photo')


def status_time(status):
    '''Get the creation time of a status, in seconds since the epoch.'''

    created_at = getattr(status, 'created_at', None)
    if created_at is None:
        return 0
    return int(created_at.timestamp())


def translate(status, tweet_filter=None):
    '''
    Convert a Tweepy status to a `Tweet`.

    Returns None if `tweet_filter` is provided and rejects the status.

    :param status: Tweepy status from the stream.
    :param tweet_filter: (Optional) Filter to check the status against.
    '''

    user = status.user
    text = status_text(status)
    if tweet_filter is not None:
        if not tweet_filter.match(user.screen_name.lower(), text):
            return None

    return Tweet(
        id=status.id,
        user=user.screen_name,
        text=text,
        time=status_time(status),
        images=extract_images(status_media(status)),
        user_name=user.name,
        user_photo=user.profile_image_url_https,
    )
