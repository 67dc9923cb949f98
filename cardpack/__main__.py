import argparse
import logging
from typing import List, Optional

from .cards import build_deck
from .models import DeckConfig


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print a playing-card deck, one card per line")
    parser.add_argument("--jokers", type=int, default=0, help="Number of jokers to append")
    parser.add_argument("--decks", type=int, default=1, help="Number of decks to combine")
    parser.add_argument("--sort", action="store_true", help="Sort by suit, then rank (jokers last)")
    parser.add_argument("--shuffle", action="store_true")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible --shuffle")
    parser.add_argument("--labels", action="store_true", help="Print short labels such as AS or TD")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    config = DeckConfig(
        jokers=args.jokers,
        decks=args.decks,
        sort=args.sort,
        shuffle=args.shuffle,
        seed=args.seed,
    )
    for card in build_deck(config):
        print(card.label if args.labels else card)


if __name__ == "__main__":
    main()
