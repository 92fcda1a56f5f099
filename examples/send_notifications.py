#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from expo.push import PushClient, PushErrorTicket, PushMessage, PushSuccessTicket


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Send a push notification to Expo push tokens")
    p.add_argument("tokens", nargs="+", help="ExponentPushToken[...] values")
    p.add_argument("--title", default="Hello")
    p.add_argument("--body", default="Sent from expo-push")
    p.add_argument("--access-token", default=None)
    p.add_argument("--max-concurrent", type=int, default=6)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with PushClient(
        access_token=args.access_token, max_concurrent_requests=args.max_concurrent
    ) as client:
        tokens = [t for t in args.tokens if client.is_push_token(t)]
        for skipped in set(args.tokens) - set(tokens):
            print(f"Skipping invalid token: {skipped}")
        if not tokens:
            return

        messages = [PushMessage(to=tokens, title=args.title, body=args.body, sound="default")]
        tickets = await client.send_push_notifications_in_chunks(messages)

    print("=" * 65)
    print(f"{'Token':45} | Ticket")
    print("-" * 65)
    for token, ticket in zip(tokens, tickets):
        if isinstance(ticket, PushErrorTicket):
            print(f"{token:45} | error: {ticket.message} ({ticket.error_code})")
        elif isinstance(ticket, PushSuccessTicket):
            print(f"{token:45} | ok: {ticket.id}")
        else:
            print(f"{token:45} | unrecognized: {ticket}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
