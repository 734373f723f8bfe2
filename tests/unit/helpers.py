'''
Shared fake collaborators for copilot-api unit tests.
'''

from __future__ import annotations

from typing import List

from copilot_api.models import AccessToken, Credentials, TokenResponse


NOW = 1_700_000_000.0


class FakeTokenExchange:
    '''
    Records every exchange and hands out a fixed token.
    '''

    def __init__(self, token: str = 'fresh_token', expires_at: int = int(NOW) + 1800) -> None:
        self.token = token
        self.expires_at = expires_at
        self.calls: List[str] = []

    async def __call__(self, pat: str) -> TokenResponse:
        self.calls.append(pat)
        return TokenResponse(token=self.token, expires_at=self.expires_at)


class FailingStore:
    '''
    Credential store whose reads always fail.
    '''

    async def get_credentials(self, context: str) -> Credentials:
        raise RuntimeError('secure storage unavailable')

    async def store_credentials(self, credentials: Credentials, context: str) -> None:
        raise RuntimeError('secure storage unavailable')


def make_credentials(
    pat: str = 'ghu_personal',
    token: str = 'cached_token',
    expires_in: int = 3600,
) -> Credentials:
    return Credentials(
        pat=pat,
        access_token=AccessToken(token=token, expires_at=int(NOW) + expires_in),
    )
