"""
Deduplicate catalog objects by their equality definition.
To run: python examples/ecommerce/main.py
"""
import logging
import sys
from decimal import Decimal
from pathlib import Path

# example lives in examples/ecommerce
sys.path.insert(0, str(Path(__file__).resolve().parent))

from structeq import configure

from config import settings
from catalog.domain import Money, OrderLine, Product, Sku

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
configure(settings)

price = Money(Decimal("9.90"), "EUR")
same_price = Money(Decimal("9.9"), "EUR")
mug = Sku("MUG-01", label="Mug")
mug_relabelled = Sku("MUG-01", label="Coffee mug")

products = {
    Product("p-1", mug, price),
    Product("p-1", mug_relabelled, same_price),
    Product("p-2", Sku("CUP-01"), price),
}
lines = {
    OrderLine(mug, 2, note="gift"),
    OrderLine(mug_relabelled, 2),
    OrderLine(mug, 3),
}

print(f"prices equal: {price == same_price}")
print(f"skus equal: {mug == mug_relabelled}")
print(f"distinct products: {len(products)}")
print(f"distinct order lines: {len(lines)}")
