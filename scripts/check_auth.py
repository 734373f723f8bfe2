#!/usr/bin/env python3
"""
copilot-api Authentication Status Checker

This script checks the stored credentials, refreshes the access token if
needed and optionally sends a test prompt.
"""

import argparse
import asyncio
from datetime import datetime, timezone

from copilot_api import CopilotAPI, FileCredentialStore
from copilot_api.core import CopilotAPIError, get_logger, get_settings, setup_logging


class AuthChecker:
    """Tool for checking authentication status."""

    def __init__(self, context: str):
        self.logger = get_logger(__name__)
        self.store = FileCredentialStore()
        self.context = context
        self.api = CopilotAPI(self.store, context=context)

    def print_banner(self):
        print("=" * 50)
        print("copilot-api Authentication Status")
        print("=" * 50)

    async def check_tokens(self) -> bool:
        """Check stored tokens, refreshing the access token if needed."""
        print("\nToken Status:")
        print("-" * 30)

        credentials = await self.store.get_credentials(self.context)
        if credentials is None or not credentials.pat:
            print(f"No personal access token stored for context '{self.context}'.")
            print(f"   Expected in {self.store.storage_path}")
            return False

        if credentials.access_token and credentials.access_token.expires_at:
            expires = datetime.fromtimestamp(credentials.access_token.expires_at, tz=timezone.utc)
            print(f"   Access token expires: {expires.isoformat()}")
        else:
            print("   No access token cached")

        print(f"   Authenticated: {'Yes' if await self.api.is_authenticated() else 'No'}")

        try:
            await self.api.get_access_token()
        except CopilotAPIError as e:
            print(f"   Failed to get a valid access token: {e.message}")
            return False

        print("   Access token is valid")
        return True

    def show_models(self):
        print("\nModels:")
        print("-" * 30)
        current = self.api.get_current_model()
        for model in self.api.get_available_models():
            marker = "*" if model.value == current.value else " "
            print(f" {marker} {model.label} ({model.value})")

    async def send_prompt(self, prompt: str):
        print("\nTest prompt:")
        print("-" * 30)
        response = await self.api.send_message_wrapped(prompt=prompt)
        print(f"   [{response.model}] {response.content}")
        if response.usage:
            print(f"   Tokens: {response.usage.total_tokens}")

    async def run(self, prompt: str = None):
        """Run the authentication check."""
        try:
            self.print_banner()

            has_valid_tokens = await self.check_tokens()
            self.show_models()

            if has_valid_tokens and prompt:
                await self.send_prompt(prompt)

            if not has_valid_tokens:
                print("\nNo valid authentication found.")

        except Exception as e:
            print(f"\nCheck failed: {str(e)}")
            self.logger.error("Auth check failed", error=str(e))


async def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--context", default=get_settings().auth.context)
    parser.add_argument("--prompt", help="Send a test prompt after checking")
    args = parser.parse_args()

    setup_logging()

    checker = AuthChecker(args.context)
    await checker.run(args.prompt)


if __name__ == "__main__":
    asyncio.run(main())
