#!/usr/bin/env python3
"""
Quick Start Example

This is a minimal example showing how to use Booker.

Usage:
    1. Copy .env.example to .env and fill in BOOKER_BASE_URL
    2. Run: python examples/quickstart.py
"""

import logging

from dotenv import load_dotenv

from booker import BookerClient, Config


def main():
    logging.basicConfig(level=logging.INFO)
    load_dotenv()

    # 1. Create configuration from BOOKER_* variables
    config = Config.from_env()

    # 2. Create client; the context manager closes the HTTP connection pool
    with BookerClient(config) as client:
        # 3. List bookings for one guest
        ids = client.booking.list_booking_ids(first_name='Sally')
        if ids is None:
            print('Booking list could not be retrieved')
            return
        print(f'Found {len(ids)} bookings')

        for booking_id in ids[:3]:
            detail = client.booking.get_booking_detail(booking_id)
            if detail is not None:
                print(f'  #{booking_id.booking_id}: {detail.first_name} {detail.last_name}')

    print('Done!')


if __name__ == '__main__':
    main()
