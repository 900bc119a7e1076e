import copy
import pickle

import pytest

from stackenv.config.core.validated import ValidatedConfig
from stackenv.core.enums import Visibility


class TestValidatedConfig:
    """Test the immutable configuration object."""

    def setup_method(self):
        self.config = ValidatedConfig(
            {
                'STRIPE_SECRET_KEY': 'sk_live_secret',
                'SENTRY_ORG': None,
                'NEXT_PUBLIC_APP_URL': 'https://app.example.com',
            },
            client_names=['NEXT_PUBLIC_APP_URL']
        )

    def test_mapping_access(self):
        assert self.config['STRIPE_SECRET_KEY'] == 'sk_live_secret'
        assert len(self.config) == 3
        assert list(self.config) == ['STRIPE_SECRET_KEY', 'SENTRY_ORG', 'NEXT_PUBLIC_APP_URL']
        assert self.config.get('UNKNOWN') is None

    def test_attribute_access(self):
        assert self.config.NEXT_PUBLIC_APP_URL == 'https://app.example.com'
        assert self.config.SENTRY_ORG is None
        with pytest.raises(AttributeError):
            self.config.UNKNOWN

    def test_absent_optional_is_none_not_empty(self):
        assert 'SENTRY_ORG' in self.config
        assert self.config['SENTRY_ORG'] is None
        assert not self.config.is_set('SENTRY_ORG')
        assert self.config.is_set('STRIPE_SECRET_KEY')

    def test_immutable(self):
        with pytest.raises(TypeError):
            self.config['SENTRY_ORG'] = 'org'
        with pytest.raises(TypeError):
            self.config.SENTRY_ORG = 'org'
        with pytest.raises(TypeError):
            del self.config.SENTRY_ORG

    def test_source_mapping_copied(self):
        values = {'A': 'x'}
        config = ValidatedConfig(values)
        values['A'] = 'changed'
        assert config['A'] == 'x'

    def test_server_and_client_views(self):
        assert self.config.client.to_dict() == {'NEXT_PUBLIC_APP_URL': 'https://app.example.com'}
        assert set(self.config.server) == {'STRIPE_SECRET_KEY', 'SENTRY_ORG'}
        assert self.config.client.visibility('NEXT_PUBLIC_APP_URL') == Visibility.CLIENT
        assert self.config.server.visibility('STRIPE_SECRET_KEY') == Visibility.SERVER

    def test_repr_masks_server_values(self):
        text = repr(self.config)
        assert 'sk_live_secret' not in text
        assert 'https://app.example.com' in text

    def test_equality(self):
        same = ValidatedConfig(self.config.to_dict(), client_names=['NEXT_PUBLIC_APP_URL'])
        assert self.config == same
        assert self.config == self.config.to_dict()
        assert self.config != ValidatedConfig(self.config.to_dict())

    def test_copy_and_pickle(self):
        for clone in (copy.copy(self.config), copy.deepcopy(self.config),
                      pickle.loads(pickle.dumps(self.config))):
            assert clone == self.config
            assert clone is not self.config
            assert clone.visibility('NEXT_PUBLIC_APP_URL') == Visibility.CLIENT
            assert clone.visibility('STRIPE_SECRET_KEY') == Visibility.SERVER
            with pytest.raises(TypeError):
                clone.SENTRY_ORG = 'acme'
