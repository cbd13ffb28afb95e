"""
Example: Product catalog commands, queries and notifications

This example walks through the whole product lifecycle using the mediator
directly, without the HTTP layer.

================================================================================
HOW TO RUN THIS EXAMPLE
================================================================================

Run the example:
   python examples/product_catalog.py

The example will:
- Create a product and print its identifier
- Read it back and list all products
- Update it, delete it twice and show that it is gone
- Show the identifiers recorded by the ProductCreated subscriber

================================================================================
WHAT THIS EXAMPLE DEMONSTRATES
================================================================================

1. Commands and queries:
   - CreateProduct, UpdateProduct and DeleteProduct change the store
   - GetProduct and ListProducts return ProductView projections

2. Notification fan-out:
   - CreateProduct records ProductCreated
   - The mediator publishes it to every subscriber after the command completes

3. Idempotent delete:
   - Deleting an absent product succeeds silently

================================================================================
REQUIREMENTS
================================================================================

Make sure you have installed:
   - catalog (this package)
   - di (dependency injection)

================================================================================
"""

import asyncio
import decimal
import logging

from catalog import products

logging.basicConfig(level=logging.DEBUG)


async def main():
    audit_trail = products.AuditTrail()
    mediator = products.bootstrap(audit_trail=audit_trail)

    product_id = await mediator.send(
        products.CreateProduct(
            name="Mouse",
            description="Wireless",
            price=decimal.Decimal("29.99"),
        ),
    )
    print(f"Created product {product_id}")

    view = await mediator.send(products.GetProduct(id=product_id))
    print(f"Read back {view.model_dump_json()}")

    await mediator.send(
        products.UpdateProduct(
            id=product_id,
            name="Mouse",
            description="Wireless, silent clicks",
            price=decimal.Decimal("34.99"),
        ),
    )
    print("There are {} products".format(len(await mediator.send(products.ListProducts()))))

    await mediator.send(products.DeleteProduct(id=product_id))
    await mediator.send(products.DeleteProduct(id=product_id))
    assert await mediator.send(products.GetProduct(id=product_id)) is None
    print(f"Audit trail: {audit_trail.created}")
    assert audit_trail.created == [product_id]


if __name__ == "__main__":
    asyncio.run(main())
