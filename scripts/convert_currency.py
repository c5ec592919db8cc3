#!/usr/bin/env python3
"""
Convert an amount between currencies using live exchange rates.

Examples:
    python scripts/convert_currency.py 1250.5 --from EUR --to GBP --country "United Kingdom"
    python scripts/convert_currency.py 99 --from USD --to SEK --country Sweden --source exchangeratesapi
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from helperkit.clients import get_exchange_rates, get_exchange_rate_for
from helperkit.utils import commaf, convert_to_float, currency_symbol, format_float, setup_logging


def main():
    """Main entry point for currency conversion."""
    parser = argparse.ArgumentParser(
        description="Convert an amount between currencies"
    )
    parser.add_argument("amount", type=str, help="Amount to convert")
    parser.add_argument("--from", dest="from_currency", default="EUR", help="Source currency code (default: EUR)")
    parser.add_argument("--to", dest="to_currency", default="GBP", help="Target currency code (default: GBP)")
    parser.add_argument(
        "--country",
        default="United Kingdom",
        help="Country whose currency symbol is used for display (default: United Kingdom)"
    )
    parser.add_argument(
        "--source",
        choices=["exchangerate-api", "exchangeratesapi"],
        default="exchangerate-api",
        help="Rate provider (default: exchangerate-api)"
    )
    parser.add_argument(
        "--fallback-rate",
        type=float,
        default=0.0,
        help="Rate to use if exchangerate-api cannot be reached"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    amount = convert_to_float(args.amount)

    if args.source == "exchangerate-api":
        rate = get_exchange_rates(args.from_currency, args.fallback_rate, target=args.to_currency)
    else:
        rate = get_exchange_rate_for(args.from_currency, args.to_currency)

    if not rate:
        logger.error(f"No {args.from_currency}->{args.to_currency} rate available")
        return 1

    converted = convert_to_float(format_float(amount * rate))
    print(f"Rate {args.from_currency}->{args.to_currency}: {rate}")
    print(currency_symbol(args.country, commaf(converted)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
