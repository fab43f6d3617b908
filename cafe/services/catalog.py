"""Product lookups for the menu pages."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Product


logger = logging.getLogger(__name__)


def get_products(db: Session) -> List[Product]:
    """Return every product on the menu, ordered by id."""
    return db.query(Product).order_by(Product.id).all()


def get_product_by_id(db: Session, product_id: int) -> Optional[Product]:
    """Return the product with this id, or None if there is none."""
    product = db.get(Product, product_id)
    if product is None:
        logger.debug("Product %s not found", product_id)
    return product
