'''
Unit tests for the access token lifecycle.
'''

from __future__ import annotations

import json

import pytest

from copilot_api.auth import FileCredentialStore, InMemoryCredentialStore, TokenManager
from copilot_api.core import AuthenticationError, TokenRefreshError
from copilot_api.models import AccessToken, Credentials

from .helpers import NOW, FailingStore, make_credentials


def make_manager(store, exchange, clock) -> TokenManager:
    return TokenManager(store, fetch_token=exchange, clock=clock)


class TestGetAccessToken:
    '''
    Test cached token reuse and refresh.
    '''

    @pytest.mark.asyncio
    async def test_reuses_token_outside_margin(self, exchange, clock) -> None:
        '''
        A token expiring more than five minutes from now is returned as is.
        '''
        store = InMemoryCredentialStore({'default': make_credentials(expires_in=301)})
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'cached_token'
        assert exchange.calls == []

    @pytest.mark.asyncio
    async def test_refreshes_at_margin_boundary(self, exchange, clock) -> None:
        '''
        Exactly five minutes before expiry counts as stale.
        '''
        store = InMemoryCredentialStore({'default': make_credentials(expires_in=300)})
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'fresh_token'
        assert exchange.calls == ['ghu_personal']

        stored = await store.get_credentials('default')
        assert stored.access_token.token == 'fresh_token'
        assert stored.access_token.expires_at == exchange.expires_at

    @pytest.mark.asyncio
    async def test_refreshes_expired_token(self, exchange, clock) -> None:
        '''
        An already expired token is refreshed once.
        '''
        store = InMemoryCredentialStore({'default': make_credentials(expires_in=-10)})
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'fresh_token'
        assert len(exchange.calls) == 1

    @pytest.mark.asyncio
    async def test_refreshes_when_no_access_token(self, exchange, clock) -> None:
        '''
        A missing access token triggers an exchange.
        '''
        store = InMemoryCredentialStore({'default': Credentials(pat='ghu_personal')})
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'fresh_token'
        assert exchange.calls == ['ghu_personal']

    @pytest.mark.asyncio
    async def test_refreshes_when_token_string_empty(self, exchange, clock) -> None:
        '''
        An empty token string is treated as missing even with a future expiry.
        '''
        credentials = Credentials(
            pat='ghu_personal',
            access_token=AccessToken(token='', expires_at=int(NOW) + 3600),
        )
        store = InMemoryCredentialStore({'default': credentials})
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'fresh_token'

    @pytest.mark.asyncio
    async def test_no_personal_token(self, exchange, clock) -> None:
        '''
        Without a personal token the call fails before any exchange.
        '''
        store = InMemoryCredentialStore({'default': Credentials(pat=None)})
        manager = make_manager(store, exchange, clock)

        with pytest.raises(AuthenticationError):
            await manager.get_access_token()
        assert exchange.calls == []

    @pytest.mark.asyncio
    async def test_no_credentials_at_all(self, exchange, clock) -> None:
        '''
        An empty store behaves like a missing personal token.
        '''
        manager = make_manager(InMemoryCredentialStore(), exchange, clock)

        with pytest.raises(AuthenticationError):
            await manager.get_access_token()
        assert exchange.calls == []

    @pytest.mark.asyncio
    async def test_refresh_preserves_other_fields(self, exchange, clock) -> None:
        '''
        The personal token and unrelated stored fields survive a refresh.
        '''
        credentials = Credentials.model_validate({
            'personalAccessToken': 'ghu_personal',
            'accessToken': {'token': 'old', 'expiresAt': int(NOW) - 1},
            'githubUser': 'octocat',
        })
        store = InMemoryCredentialStore({'default': credentials})
        manager = make_manager(store, exchange, clock)

        await manager.get_access_token()

        stored = (await store.get_credentials('default')).to_store()
        assert stored == {
            'personalAccessToken': 'ghu_personal',
            'accessToken': {'token': 'fresh_token', 'expiresAt': exchange.expires_at},
            'githubUser': 'octocat',
        }

    @pytest.mark.asyncio
    async def test_exchange_error_propagates(self, clock) -> None:
        '''
        A rejected exchange is raised unchanged and nothing is stored.
        '''
        error = TokenRefreshError('revoked')

        async def reject(pat: str):
            raise error

        original = make_credentials(expires_in=0)
        store = InMemoryCredentialStore({'default': original})
        manager = TokenManager(store, fetch_token=reject, clock=clock)

        with pytest.raises(TokenRefreshError) as exc_info:
            await manager.get_access_token()

        assert exc_info.value is error
        assert await store.get_credentials('default') is original

    @pytest.mark.asyncio
    async def test_uses_configured_context(self, exchange, clock) -> None:
        '''
        Credentials are read from and written to the manager's context only.
        '''
        store = InMemoryCredentialStore({
            'vault-a': make_credentials(expires_in=0),
            'vault-b': make_credentials(token='other'),
        })
        manager = TokenManager(store, context='vault-a', fetch_token=exchange, clock=clock)

        assert await manager.get_access_token() == 'fresh_token'
        assert (await store.get_credentials('vault-b')).access_token.token == 'other'

    @pytest.mark.asyncio
    async def test_accepts_mapping_from_exchange(self, clock) -> None:
        '''
        An exchange returning the raw JSON mapping is accepted.
        '''
        async def exchange(pat: str):
            return {'token': 'from_dict', 'expires_at': int(NOW) + 1800, 'refresh_in': 1500}

        store = InMemoryCredentialStore({'default': Credentials(pat='ghu_personal')})
        manager = TokenManager(store, fetch_token=exchange, clock=clock)

        assert await manager.get_access_token() == 'from_dict'


class TestIsAuthenticated:
    '''
    Test the non-throwing authentication query.
    '''

    @pytest.mark.asyncio
    async def test_valid_session(self, store, exchange, clock) -> None:
        manager = make_manager(store, exchange, clock)

        assert await manager.is_authenticated() is True
        assert exchange.calls == []

    @pytest.mark.asyncio
    async def test_uses_exact_expiry(self, exchange, clock) -> None:
        '''
        A token inside the refresh margin still counts as authenticated.
        '''
        store = InMemoryCredentialStore({'default': make_credentials(expires_in=60)})
        manager = make_manager(store, exchange, clock)

        assert await manager.is_authenticated() is True

    @pytest.mark.asyncio
    async def test_expired_at_now(self, exchange, clock) -> None:
        store = InMemoryCredentialStore({'default': make_credentials(expires_in=0)})
        manager = make_manager(store, exchange, clock)

        assert await manager.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_missing_pieces(self, exchange, clock) -> None:
        cases = [
            None,
            Credentials(pat=None, access_token=AccessToken(token='t', expires_at=int(NOW) + 60)),
            Credentials(pat='ghu_personal'),
            Credentials(pat='ghu_personal', access_token=AccessToken(token='', expires_at=int(NOW) + 60)),
        ]
        for credentials in cases:
            store = InMemoryCredentialStore()
            if credentials is not None:
                await store.store_credentials(credentials, 'default')
            manager = make_manager(store, exchange, clock)

            assert await manager.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_store_failure_is_false(self, exchange, clock) -> None:
        '''
        A failing store is reported as unauthenticated, never raised.
        '''
        manager = make_manager(FailingStore(), exchange, clock)

        assert await manager.is_authenticated() is False


INCOMPLETE_STORED_TOKENS = [
    {'token': 'stale', 'expiresAt': None},
    {'expiresAt': int(NOW) + 3600},
]


class TestIncompleteStoredToken:
    '''
    Test stored access tokens with a missing token or expiry.
    '''

    def write_store(self, tmp_path, access_token) -> FileCredentialStore:
        path = tmp_path / 'credentials.json'
        path.write_text(json.dumps({
            'default': {'personalAccessToken': 'ghu', 'accessToken': access_token},
        }), encoding='utf-8')
        return FileCredentialStore(path)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('access_token', INCOMPLETE_STORED_TOKENS)
    async def test_get_access_token_refreshes(self, tmp_path, exchange, clock, access_token) -> None:
        '''
        A stored token without a value or expiry is exchanged again.
        '''
        store = self.write_store(tmp_path, access_token)
        manager = make_manager(store, exchange, clock)

        assert await manager.get_access_token() == 'fresh_token'
        assert exchange.calls == ['ghu']

        stored = await store.get_credentials('default')
        assert stored.access_token == AccessToken(token='fresh_token', expires_at=exchange.expires_at)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('access_token', INCOMPLETE_STORED_TOKENS)
    async def test_is_not_authenticated(self, tmp_path, exchange, clock, access_token) -> None:
        store = self.write_store(tmp_path, access_token)
        manager = make_manager(store, exchange, clock)

        assert await manager.is_authenticated() is False
        assert exchange.calls == []
