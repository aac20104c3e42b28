#!/usr/bin/env python3
"""
Basic SDK usage examples for the Dropbox API client.

Reads the access token from DROPBOX_ACCESS_TOKEN.
"""

import asyncio
import os

from dropbox_api import ApiError, DropboxError, HttpClients, setup_logging
from dropbox_api.api.check import CheckUserRequest
from dropbox_api.api.files import ListFolderRequest
from dropbox_api.api.users import GetCurrentAccountRequest
from dropbox_api.models.check import EchoArg
from dropbox_api.models.files import ListFolderArgs


def blocking_calls(token: str, clients: HttpClients):
    """Make calls on the current thread."""
    print("=== Blocking Calls ===")

    response = CheckUserRequest(token, EchoArg(query="ping")).call_sync(clients)
    print(f"✓ check/user echoed: {response.payload.result}")

    account = GetCurrentAccountRequest(token).call_sync(clients)
    if account is None:
        print("✓ No account details returned")
    else:
        print(f"✓ Signed in as {account.payload.name.display_name}")


async def concurrent_calls(token: str, clients: HttpClients):
    """Start several calls on the event loop and wait for all of them."""
    print("\n=== Concurrent Calls ===")

    tasks = [
        ListFolderRequest(token, ListFolderArgs(path=path)).call(clients)
        for path in ("", "/Homework", "/Photos")
    ]

    for result in await asyncio.gather(*tasks, return_exceptions=True):
        if isinstance(result, DropboxError):
            print(f"❌ {result.error_summary or result.message}")
        elif isinstance(result, ApiError):
            print(f"❌ {result}")
        elif result is not None:
            print(f"✓ {len(result.payload.entries)} entries")


async def main():
    token = os.environ.get("DROPBOX_ACCESS_TOKEN")
    if not token:
        print("Set DROPBOX_ACCESS_TOKEN to run the examples")
        return

    setup_logging()

    async with HttpClients() as clients:
        blocking_calls(token, clients)
        await concurrent_calls(token, clients)


if __name__ == "__main__":
    asyncio.run(main())
