#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from expo.push import PushClient, PushErrorCode, PushErrorReceipt, PushSuccessReceipt


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch Expo push receipts by ticket id")
    p.add_argument("receipt_ids", nargs="+")
    p.add_argument("--access-token", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with PushClient(access_token=args.access_token) as client:
        for ids in client.chunk_push_notification_receipt_ids(args.receipt_ids):
            receipts = await client.get_push_notification_receipts(ids)
            for receipt_id in ids:
                receipt = receipts.get(receipt_id)
                if receipt is None:
                    print(f"{receipt_id}: not available yet")
                elif isinstance(receipt, PushErrorReceipt):
                    print(f"{receipt_id}: error: {receipt.message}")
                    if receipt.error_code is PushErrorCode.DEVICE_NOT_REGISTERED:
                        print("  -> stop sending to this device")
                elif isinstance(receipt, PushSuccessReceipt):
                    print(f"{receipt_id}: ok")
                else:
                    print(f"{receipt_id}: unrecognized: {receipt}")


if __name__ == "__main__":
    asyncio.run(main())
