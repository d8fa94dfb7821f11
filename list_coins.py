"""Script to list coins from the feed in the console."""
import argparse
import asyncio
import sys

from crypto_list.core.logging_config import setup_logging
from crypto_list.models.listing import CryptoFilter, FailedState
from crypto_list.presentation.console import ConsoleListPresenter
from crypto_list.services.crypto_list_service import create_crypto_list_service
from crypto_list.services.listing_view_model import CryptoListingViewModel


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="List coins from the crypto feed")
    parser.add_argument("--search", default="", help="Case-sensitive text matched against name and symbol")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        choices=[f.value for f in CryptoFilter],
        help="Filter to apply (repeatable)"
    )
    parser.add_argument("--yes", action="store_true", help="Clear filters without asking when nothing matches")
    return parser.parse_args(argv)


def ask(question: str) -> bool:
    answer = input(f"{question} [Y/n] ").strip().lower()
    return answer in ("", "y", "yes")


async def run(args) -> int:
    view_model = CryptoListingViewModel(create_crypto_list_service())
    # applied before subscribing so only the loaded result is printed
    if args.filters:
        view_model.set_filters(CryptoFilter(f) for f in args.filters)
    if args.search:
        view_model.search(args.search)
    presenter = ConsoleListPresenter(view_model, confirm=(lambda q: True) if args.yes else ask)

    try:
        await view_model.load()
        if isinstance(view_model.state_publisher.latest, FailedState):
            return 1
    finally:
        presenter.close()

    return 0


def main():
    """Main function to list coins."""
    args = parse_args()
    setup_logging()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
