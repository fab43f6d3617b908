import logging

from cafe.db import SessionLocal, init_db
from cafe.logging_config import setup_logging
from cafe.models import Product, User

logger = logging.getLogger(__name__)

MENU = [
    {"name": "Espresso", "price": 2.50, "description": "A single shot of our house blend."},
    {"name": "Flat White", "price": 3.80, "description": "Double ristretto with velvety steamed milk."},
    {"name": "Cappuccino", "price": 3.60, "description": "Espresso, steamed milk and a thick cap of foam."},
    {"name": "Chai Latte", "price": 3.90, "description": "Spiced black tea with steamed milk."},
    {"name": "Butter Croissant", "price": 3.20, "description": "Baked fresh every morning."},
    {"name": "Banana Bread", "price": 3.50, "description": "A thick slice, served warm."},
]

DEMO_USERS = [
    {"username": "matthew", "password": "latte"},
]


def seed_menu():
    init_db()

    db = SessionLocal()
    try:
        existing = db.query(Product).count()
        if existing > 0:
            logger.info("Menu already has %d products. Not seeding again.", existing)
        else:
            db.add_all(Product(**item) for item in MENU)
            logger.info("Seeded %d products", len(MENU))

        for account in DEMO_USERS:
            if db.query(User).filter(User.username == account["username"]).first() is None:
                db.add(User(**account))
                logger.info("Seeded demo user")

        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    seed_menu()
