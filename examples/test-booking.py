#!/usr/bin/env python3
"""
Test script for booking operations

Usage:
    1. Copy .env.example to .env and fill in your credentials
       (BOOKER_COOKIE=token=... or BOOKER_TOKEN=Basic ... for update/delete)
    2. Run: python examples/test-booking.py
"""

import logging
import sys

from dotenv import load_dotenv

from booker import BookerClient, BookingDates, BookingDetail, Config, TransportException


def test_booking(client: BookerClient):
    bookings = client.booking

    print('=== Testing Booking Operations ===')
    print()

    # Step 1: Create booking
    print('Step 1: Creating booking...')
    detail = BookingDetail(
        first_name='Jim',
        last_name='Brown',
        total_price=111,
        deposit_paid=True,
        booking_dates=BookingDates('2018-01-01', '2019-01-01'),
        additional_needs='Breakfast',
    )
    record = bookings.create_booking(detail)
    if record is None:
        print('⚠ Booking was not created.')
        sys.exit(1)
    print(f'✓ Booking created: {record.booking_id}')
    print()

    # Step 2: Update booking
    print('Step 2: Updating booking...')
    updated = bookings.update_booking(record.with_booking(detail.replace(total_price=222)))
    print(f'✓ Updated price: {updated.total_price if updated else "N/A"}')
    print()

    # Step 3: Read it back
    print('Step 3: Checking booking...')
    print(f'✓ Status code: {bookings.get_response_code_of_booking_get_request(record.booking_id)}')
    print(f'✓ Detail: {bookings.get_booking_detail(record.id)}')
    print()

    # Step 4: Delete booking
    print('Step 4: Deleting booking...')
    print(f'✓ Deleted: {bookings.delete_booking(record.booking_id)}')
    print(f'✓ Status code after delete: {bookings.get_response_code_of_booking_get_request(record.booking_id)}')
    print()

    print('✓ All booking tests completed!')


def main():
    logging.basicConfig(level=logging.INFO)
    load_dotenv()

    try:
        config = Config.from_env()
    except ValueError as error:
        print(f'Error: {error}')
        sys.exit(1)

    with BookerClient(config) as client:
        try:
            test_booking(client)
        except TransportException as error:
            print(f'❌ Error: {error}')
            if error.status_code is not None:
                print(f'   Status Code: {error.status_code}')
            if error.code:
                print(f'   Error Code: {error.code}')
            sys.exit(1)


if __name__ == '__main__':
    main()
