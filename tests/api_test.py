import json
import os
import tempfile
import unittest
import unittest.mock

import requests
import tweepy

from tweetboard import api

CREDENTIALS = api.Credentials('consumer', 'consumer-secret', 'access', 'access-secret')


def http_error(error_type, status_code, reason):
    '''Create a Tweepy HTTP error from a fake response.'''

    response = unittest.mock.Mock(status_code=status_code, reason=reason)
    response.json.return_value = {'errors': [{'code': 32, 'message': reason}]}
    return error_type(response)


class CredentialsTest(unittest.TestCase):

    def test_load_credentials(self):
        data = {
            'consumer_key': 'consumer',
            'consumer_secret': 'consumer-secret',
            'access_token': 'access',
            'access_token_secret': 'access-secret',
        }
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, 'api.json')
            with open(filename, 'w') as f:
                json.dump(data, f)
            self.assertEqual(api.load_credentials(filename), CREDENTIALS)

    def test_missing_key(self):
        with self.assertRaises(KeyError):
            api.Credentials.from_dict({'consumer_key': 'consumer'})

    def test_repr(self):
        self.assertNotIn('secret', repr(CREDENTIALS))
        self.assertIn('consumer', repr(CREDENTIALS))


class ErrorsTest(unittest.TestCase):

    def test_is_connection_error(self):
        self.assertTrue(api.is_connection_error(requests.ConnectionError('refused')))
        self.assertTrue(api.is_connection_error(tweepy.TweepyException('Failed to send request: timed out')))
        self.assertFalse(api.is_connection_error(tweepy.TweepyException('Stream is already connected')))

    def test_is_authorization_error(self):
        unauthorized = http_error(tweepy.Unauthorized, 401, 'Could not authenticate you.')
        forbidden = http_error(tweepy.Forbidden, 403, 'Forbidden')
        self.assertTrue(api.is_authorization_error(unauthorized))
        self.assertFalse(api.is_authorization_error(forbidden))
        self.assertFalse(api.is_authorization_error(tweepy.TweepyException('Unauthorized')))


class ClientTest(unittest.TestCase):

    def setUp(self):
        self.client = api.Client(CREDENTIALS, timeout=10)

    def test_timeout(self):
        self.assertEqual(self.client.api.timeout, 10)
        self.assertEqual(api.Client(CREDENTIALS).api.timeout, api.DEFAULT_TIMEOUT)

    def test_verify_credentials(self):
        with unittest.mock.patch.object(self.client.api, 'verify_credentials', return_value='me') as verify:
            self.assertEqual(self.client.verify_credentials(), 'me')
        verify.assert_called_once_with()

    def test_filter(self):
        with unittest.mock.patch.object(api, 'Subscription') as subscription_type:
            subscription = self.client.filter(('python', 'rust'), ('en',), stall_warnings=True)

        subscription_type.assert_called_once_with('consumer', 'consumer-secret', 'access', 'access-secret')
        self.assertIs(subscription, subscription_type.return_value)
        subscription.filter.assert_called_once_with(
            track=['python', 'rust'],
            languages=['en'],
            stall_warnings=True,
            threaded=True,
        )

    def test_filter_any_language(self):
        with unittest.mock.patch.object(api, 'Subscription') as subscription_type:
            self.client.filter(('python',), ())

        subscription_type.return_value.filter.assert_called_once_with(
            track=['python'],
            languages=None,
            stall_warnings=True,
            threaded=True,
        )


if __name__ == '__main__':
    unittest.main()
