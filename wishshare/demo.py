"""Populate a running server with fake data and print what was created."""

import argparse
import logging
import os
import random
from dataclasses import dataclass, field
from typing import Any

from faker import Faker

from wishshare.client import DEFAULT_BASE_URL, WishshareClient, WishshareClientError

logger = logging.getLogger(__name__)

PRODUCTS = ["iPhone", "MacBook", "Watch", "iPad", "AirPods"]

SUMMARY_TEMPLATE = 'User {username} ({email}) created wishlist "{title}" with items: {items}'


@dataclass
class DemoResult:
    user: dict[str, Any]
    wishlist: dict[str, Any]
    items: list[dict[str, Any]] = field(default_factory=list)


def generate_user_data(fake: Faker) -> dict[str, str]:
    return {
        "username": fake.unique.user_name(),
        "email": fake.unique.email(),
        "password": fake.password(),
    }


def generate_wishlist_data(fake: Faker) -> dict[str, str]:
    return {
        "title": fake.sentence(),
        "description": fake.paragraph(),
    }


def generate_item_data(fake: Faker) -> dict[str, str]:
    return {
        "name": f"{random.choice(PRODUCTS)} {fake.word()}",
        "description": fake.sentence(),
        "price": f"{random.random() * 1000 + 100:.2f}",
        "link": fake.url(),
    }


def format_summary(result: DemoResult) -> str:
    items = ", ".join(f"{item['name']} ({item['price']})" for item in result.items)
    return SUMMARY_TEMPLATE.format(
        username=result.user["username"],
        email=result.user["email"],
        title=result.wishlist["title"],
        items=items,
    )


def run_demo(client: WishshareClient, fake: Faker, item_count: int = 3) -> DemoResult:
    """Register and log in a fake user, then create a wishlist with items.

    A failed item is logged and skipped; registration, login and wishlist
    creation failures propagate.
    """
    user_data = generate_user_data(fake)
    user = client.register(**user_data)
    logger.info("Registered user %s (%s)", user["username"], user["id"])

    client.login(user_data["username"], user_data["password"])
    logger.info("Logged in as %s", user["username"])

    wishlist = client.create_wishlist(**generate_wishlist_data(fake))
    logger.info("Created wishlist %s (%s)", wishlist["title"], wishlist["id"])

    result = DemoResult(user=user, wishlist=wishlist)
    for _ in range(item_count):
        item_data = generate_item_data(fake)
        try:
            item = client.add_item(wishlist["id"], **item_data)
        except WishshareClientError as exc:
            logger.warning("Failed to add item %s: %s", item_data["name"], exc)
            continue
        logger.info("Added item %s (%s) -> %s", item["name"], item["price"], item["id"])
        result.items.append(item)
    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--base-url",
        default=os.environ.get("WISHSHARE_BASE_URL", DEFAULT_BASE_URL),
        help="API base URL",
    )
    parser.add_argument("--items", type=int, default=3, help="number of items to add")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible fake data")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    fake = Faker()
    if args.seed is not None:
        Faker.seed(args.seed)
        random.seed(args.seed)

    with WishshareClient(args.base_url) as client:
        result = run_demo(client, fake, item_count=args.items)

    print("\n=== Added Wishlist items ===")
    print(format_summary(result))


if __name__ == "__main__":
    main()
